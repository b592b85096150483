import logging
import discord
from discord.ext import commands
from tunedeck.core.config import DisplayConfig
from tunedeck.core.exceptions import EmptyPlaybackError, EmptyQueueError, PageOutOfRangeError
from tunedeck.voice.embeds import MusicEmbed
from tunedeck.voice.state import GuildMusicState

logger = logging.getLogger(__name__)

class MusicCog(commands.Cog):
    def __init__(self, bot, config=None):
        self.bot = bot
        self.config = config or DisplayConfig.from_env()
        self.guild_states = {}  # guild_id: GuildMusicState

    def get_guild_state(self, guild_id):
        if guild_id not in self.guild_states:
            self.guild_states[guild_id] = GuildMusicState()
        return self.guild_states[guild_id]

    async def build_now_playing_embed(self, guild_id) -> discord.Embed:
        state = self.get_guild_state(guild_id)
        async with state.lock:
            snapshot = state.snapshot()
        return MusicEmbed.to_embed(MusicEmbed.build_playing_panel(snapshot, self.config))

    async def build_queue_embed(self, guild_id, page=1) -> discord.Embed:
        state = self.get_guild_state(guild_id)
        async with state.lock:
            snapshot = state.snapshot()
        return MusicEmbed.to_embed(MusicEmbed.build_queue_panel(snapshot, page, self.config))

    @commands.hybrid_command(name="nowplaying", aliases=["np"], description="Show the song that is playing right now.")
    async def now_playing(self, ctx):
        try:
            embed = await self.build_now_playing_embed(ctx.guild.id)
        except EmptyPlaybackError:
            await ctx.send("Nothing is playing right now.")
            return
        await ctx.send(embed=embed)

    @commands.hybrid_command(name="queue", description="Show the current music queue.")
    async def queue(self, ctx, page: int = 1):
        try:
            embed = await self.build_queue_embed(ctx.guild.id, page)
        except EmptyQueueError:
            await ctx.send("The queue is empty.")
            return
        except PageOutOfRangeError as e:
            logger.debug(f"Queue page {e.page} requested in guild {ctx.guild.id}, last page is {e.max_page}")
            await ctx.send(f"The queue isn't that big. Pick a page between 1 and {e.max_page}.")
            return
        await ctx.send(embed=embed)

async def setup(bot):
    await bot.add_cog(MusicCog(bot))
