import re
from dataclasses import dataclass
from typing import Optional, Sequence

from tunedeck.core.config import DisplayConfig
from tunedeck.core.utils import ProgressBar, StringUtils, TimeUtils
from .models import MediaSource, PlaybackState, PlayerStatus, QueuedTrack
from .validation import MusicValidation

DEFAULT_CONFIG = DisplayConfig()

@dataclass(frozen=True)
class QueueSummary:
    count: int
    total_seconds: float

    @classmethod
    def from_queue(cls, queue: Sequence[QueuedTrack]) -> 'QueueSummary':
        # live entries count with whatever length the player reports
        return cls(count=len(queue), total_seconds=sum(track.length for track in queue))

    @property
    def count_text(self) -> str:
        if self.count == 0:
            return "-"
        return "1 song" if self.count == 1 else f"{self.count} songs"

    @property
    def total_text(self) -> str:
        return TimeUtils.format_duration(self.total_seconds) if self.total_seconds > 0 else "-"

class Formatter:
    ANNOTATION_RE = re.compile(r"\[.*\]")
    NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
    PLAY_BUTTON = "▶️"
    STOP_BUTTON = "⏹️"

    @staticmethod
    def max_title_length(title: str, config: DisplayConfig = DEFAULT_CONFIG) -> int:
        """Wide glyphs take roughly twice the room, so non-ASCII titles get a shorter budget."""
        if Formatter.NON_ASCII_RE.search(title):
            return config.wide_title_length
        return config.narrow_title_length

    @staticmethod
    def format_song_title(track: QueuedTrack, truncate: bool = False, config: DisplayConfig = DEFAULT_CONFIG) -> str:
        """Render a track as a markdown link, starting at the track's offset."""
        if track.source == MediaSource.LIVE_STREAM:
            return f"[{track.title}]({track.url})"

        title = Formatter.ANNOTATION_RE.sub("", track.title, count=1).strip()
        if truncate:
            title = StringUtils.truncate(title, Formatter.max_title_length(title, config))

        if len(track.url) == MusicValidation.VIDEO_ID_LENGTH:
            video_id = track.url
        else:
            video_id = MusicValidation.resolve_video_id(track.url) or ""

        timestamp = "" if track.offset == 0 else f"&t={track.offset}"
        return f"[{title}](https://{config.video_host}/watch?v={video_id}{timestamp})"

    @staticmethod
    def format_duration(track: QueuedTrack) -> str:
        return "live" if track.is_live else TimeUtils.format_duration(track.length)

    @staticmethod
    def format_player_ui(state: PlaybackState, config: DisplayConfig = DEFAULT_CONFIG) -> str:
        """Button, progress bar and elapsed time for the current track."""
        song: Optional[QueuedTrack] = state.current_track
        if not song:
            return ""

        # the button shows the action available, not the current status
        button = Formatter.STOP_BUTTON if state.status == PlayerStatus.PLAYING else Formatter.PLAY_BUTTON
        fraction = state.position / song.length if song.length else 0
        progress_bar = ProgressBar.render(config.progress_bar_width, fraction)
        if song.is_live:
            elapsed = "live"
        else:
            elapsed = f"{TimeUtils.format_duration(state.position)}/{TimeUtils.format_duration(song.length)}"
        return f"{button} {progress_bar} `[{elapsed}]` 🔉"

    @staticmethod
    def format_queue_entry(index: int, track: QueuedTrack, config: DisplayConfig = DEFAULT_CONFIG) -> str:
        """One numbered queue line; index is the 0-based position in the queue."""
        title = Formatter.format_song_title(track, truncate=True, config=config)
        return f"`{index + 1}.` {title} `[{Formatter.format_duration(track)}]`"
