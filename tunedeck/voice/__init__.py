from .embeds import *
from .formatter import *
from .models import *
from .state import *
from .validation import *

__all__ = [
    # embeds.py
    "MusicEmbed",
    # formatter.py
    "Formatter", "QueueSummary",
    # models.py
    "MediaSource", "PlayerStatus", "PanelColor", "QueuedPlaylist", "QueuedTrack",
    "PlaybackState", "PanelField", "DisplayPanel",
    # state.py
    "GuildMusicState",
    # validation.py
    "MusicValidation"
]
