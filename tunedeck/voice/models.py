from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

class MediaSource(Enum):
    STANDARD_MEDIA = "standard"
    LIVE_STREAM = "live"

class PlayerStatus(Enum):
    PLAYING = "playing"
    PAUSED = "paused"

class PanelColor(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    NEUTRAL = "neutral"

@dataclass(frozen=True)
class QueuedPlaylist:
    title: str

@dataclass(frozen=True)
class QueuedTrack:
    """One entry of the playback queue, as reported by the player."""
    title: str
    url: str
    length: float
    requested_by: str
    artist: str
    offset: int = 0
    source: MediaSource = MediaSource.STANDARD_MEDIA
    is_live: bool = False
    thumbnail_url: Optional[str] = None
    playlist: Optional[QueuedPlaylist] = None

    @classmethod
    def from_info(cls, info: Dict[str, Any], requested_by) -> 'QueuedTrack':
        """Create a track from a yt-dlp style info dict."""
        is_live = bool(info.get("is_live"))
        playlist_title = info.get("playlist_title") or info.get("playlist")
        return cls(
            title=info.get("title") or "Unknown Title",
            url=info.get("webpage_url") or info.get("id") or "",
            length=info.get("duration") or 0,
            requested_by=str(requested_by),
            artist=info.get("uploader") or info.get("channel") or "Unknown",
            offset=int(info.get("start_time") or 0),
            source=MediaSource.LIVE_STREAM if is_live else MediaSource.STANDARD_MEDIA,
            is_live=is_live,
            thumbnail_url=info.get("thumbnail") or None,
            playlist=QueuedPlaylist(playlist_title) if playlist_title else None
        )

@dataclass(frozen=True)
class PlaybackState:
    """Read-only snapshot of a guild's player."""
    status: PlayerStatus
    position: float = 0
    current_track: Optional[QueuedTrack] = None
    queue: Tuple[QueuedTrack, ...] = ()

    @property
    def queue_size(self) -> int:
        return len(self.queue)

@dataclass(frozen=True)
class PanelField:
    name: str
    value: str
    inline: bool = True

@dataclass(frozen=True)
class DisplayPanel:
    """Platform-neutral rendering of a moment of playback state."""
    title: str
    color: PanelColor
    description: str
    fields: Tuple[PanelField, ...] = field(default_factory=tuple)
    footer_text: str = ""
    thumbnail_url: Optional[str] = None
