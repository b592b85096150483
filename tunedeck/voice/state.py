import asyncio

from .models import PlaybackState, PlayerStatus


class GuildMusicState:
    """Per-guild player state, written by the playback engine."""

    def __init__(self):
        self.queue = []
        self.now_playing = None
        self.position = 0
        self.status = PlayerStatus.PAUSED
        self.lock = asyncio.Lock()

    def snapshot(self) -> PlaybackState:
        """Copy the current state into an immutable PlaybackState for rendering."""
        return PlaybackState(
            status=self.status,
            position=self.position,
            current_track=self.now_playing,
            queue=tuple(self.queue)
        )
