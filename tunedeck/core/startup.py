import os
import logging

from .filters import Filters

class Startup:
    @staticmethod
    def find_cogs(base_dir="cogs"):
        cogs = []
        for root, dirs, files in os.walk(base_dir):
            if "WIP" in root.split(os.sep):
                continue
            for file in files:
                if file.endswith("Cog.py"):
                    rel_path = os.path.relpath(os.path.join(root, file), base_dir)
                    module = rel_path.replace(os.sep, ".")[:-3]
                    cogs.append(f"{os.path.basename(base_dir)}.{module}")
        return sorted(cogs)

class TunedeckLogger:
    """Console logging for the bot, with discord.py's loggers routed through the root handler."""

    FORMAT = "[%(asctime)s]: %(message)s"
    DISCORD_LOGGERS = ("discord", "discord.client", "discord.gateway")
    COMMAND_LOGGER = "discord.ext.commands.bot"

    def __init__(self, level="INFO", format_str=FORMAT):
        # accepts a level name from the environment or a logging constant
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        self.level = level if isinstance(level, int) else logging.INFO
        self.formatter = logging.Formatter(format_str)

    @classmethod
    def from_config(cls, config):
        return cls(level=config.log_level)

    def filter(self, record):
        msg = record.getMessage()
        return bool(msg and msg.strip())

    def _attach(self, handler):
        handler.setFormatter(self.formatter)
        if self.filter not in handler.filters:
            handler.addFilter(self.filter)

    def setup(self):
        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)
        if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
            root_logger.addHandler(logging.StreamHandler())
        for handler in root_logger.handlers:
            self._attach(handler)

        for logger_name in self.DISCORD_LOGGERS:
            logger_obj = logging.getLogger(logger_name)
            for handler in logger_obj.handlers:
                self._attach(handler)
            logger_obj.propagate = True

        command_logger = logging.getLogger(self.COMMAND_LOGGER)
        if Filters.filterlogs not in command_logger.filters:
            command_logger.addFilter(Filters.filterlogs)
        return root_logger
