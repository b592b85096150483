import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

@dataclass
class BotConfig:
    token: str
    guild_id: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls):
        return cls(
            token=os.getenv('BOT_TOKEN'),
            guild_id=int(os.getenv('GUILD_ID')) if os.getenv('GUILD_ID') else None,
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper()
        )

@dataclass(frozen=True)
class DisplayConfig:
    """Layout constants for music panels."""
    page_size: int = 10
    narrow_title_length: int = 48
    wide_title_length: int = 28
    progress_bar_width: int = 15
    video_host: str = "www.youtube.com"

    def __post_init__(self):
        for key in ("page_size", "narrow_title_length", "wide_title_length", "progress_bar_width"):
            value = getattr(self, key)
            if not isinstance(value, int) or value < 1:
                raise ConfigurationError(key, value, "a positive integer")
        if not self.video_host:
            raise ConfigurationError("video_host", self.video_host, "a host name")

    @classmethod
    def from_env(cls):
        defaults = cls()
        return cls(
            page_size=_int_env('QUEUE_PAGE_SIZE', defaults.page_size),
            narrow_title_length=_int_env('TITLE_LENGTH_NARROW', defaults.narrow_title_length),
            wide_title_length=_int_env('TITLE_LENGTH_WIDE', defaults.wide_title_length),
            progress_bar_width=_int_env('PROGRESS_BAR_WIDTH', defaults.progress_bar_width),
            video_host=os.getenv('VIDEO_HOST', defaults.video_host)
        )

def _int_env(key, default):
    raw = os.getenv(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(key, raw, "an integer") from None
