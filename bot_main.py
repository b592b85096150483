import os
import time
from dotenv import load_dotenv
import discord
from discord.ext import commands
from tunedeck.core import BotConfig, Startup, TunedeckLogger
import logging
import asyncio

# --- Environment & Logging ---
load_dotenv()
CONFIG = BotConfig.from_env()
TunedeckLogger.from_config(CONFIG).setup()
logger = logging.getLogger(__name__)

intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True

STARTUP_TIME = time.perf_counter()

class MyBot(commands.Bot):
    """Discord bot serving the music panels."""

    def __init__(self, *args, config=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.config = config or CONFIG
        self.startup_log_lines = []
        self.cog_load_results = []
        self._synced_commands = 0

    async def setup_hook(self):
        self.startup_log_lines.append("\n" + "="*40 + f"\nStarting bot process (PID: {os.getpid()})...")

        for cog in Startup.find_cogs(os.path.join(os.path.dirname(os.path.abspath(__file__)), "cogs")):
            start = time.perf_counter()
            try:
                await self.load_extension(cog)
                elapsed = time.perf_counter() - start
                self.cog_load_results.append(f"  [OK]   {cog} ({elapsed:.2f}s)")
            except Exception as e:
                elapsed = time.perf_counter() - start
                self.cog_load_results.append(
                    f"  [FAIL] {cog} ({elapsed:.2f}s) ({e})")
        self.startup_log_lines.append(
            "="*40 + "\nLoaded Cogs:\n" +
            "\n".join(self.cog_load_results) + "\n" + "="*40
        )

        try:
            if self.config.guild_id:
                guild = discord.Object(id=self.config.guild_id)
                self.tree.copy_global_to(guild=guild)
                synced = await self.tree.sync(guild=guild)
            else:
                synced = await self.tree.sync()
            self._synced_commands = len(synced)
        except Exception as e:
            logger.error("Failed to sync commands: %s", e, exc_info=True)

    async def on_ready(self):
        elapsed = time.perf_counter() - STARTUP_TIME
        self.startup_log_lines.append(f"Bot process startup complete in {elapsed:.2f} seconds (PID: {os.getpid()})")
        self.startup_log_lines.append(f"Bot is ready as {self.user}")
        self.startup_log_lines.append(f"Synced {self._synced_commands} command(s)")

        guild_lines = [f"  {guild.name} ({guild.id})" for guild in self.guilds]
        self.startup_log_lines.append("="*40 + "\nConnected Guilds:\n" + "\n".join(guild_lines) + "\n" + "="*40)
        logger.info("\n".join(self.startup_log_lines))

def main():
    bot = MyBot(command_prefix='!', help_command=None, intents=intents,
                case_insensitive=True,
                config=CONFIG,
                status=discord.Status.online,
                activity=discord.Activity(type=discord.ActivityType.listening,
                name="the queue"))

    async def run():
        if not CONFIG.token:
            logger.error("Error: BOT_TOKEN not found in .env file.")
            return
        try:
            await bot.start(CONFIG.token)
        except KeyboardInterrupt:
            logger.info("Bot shutting down...")
            await bot.close()
        except Exception as e:
            logger.error("Error running bot: %s", e, exc_info=True)

    asyncio.run(run())

if __name__ == "__main__":
    main()
