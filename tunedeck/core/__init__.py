from .config import *
from .exceptions import *
from .filters import *
from .startup import *
from .utils import *

__all__ = [
    # config.py
    "BotConfig", "DisplayConfig",
    # exceptions.py
    "TunedeckException", "ConfigurationError", "PanelError",
    "EmptyPlaybackError", "EmptyQueueError", "PageOutOfRangeError",
    # filters.py
    "Filters",
    # startup.py
    "Startup", "TunedeckLogger",
    # utils.py
    "TimeUtils", "StringUtils", "ProgressBar"
]
