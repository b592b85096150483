import pytest

from tunedeck.core.config import DisplayConfig
from tunedeck.voice.models import PlaybackState, PlayerStatus, QueuedTrack


@pytest.fixture
def config():
    return DisplayConfig()


@pytest.fixture
def make_track():
    def _make(title="Song", url="dQw4w9WgXcQ", length=120, **kwargs):
        kwargs.setdefault("requested_by", "123")
        kwargs.setdefault("artist", "Artist")
        return QueuedTrack(title=title, url=url, length=length, **kwargs)
    return _make


@pytest.fixture
def make_state(make_track):
    def _make(queue_size=0, status=PlayerStatus.PLAYING, position=30, current=None, queue=None):
        if queue is None:
            queue = [make_track(title=f"Track {i + 1}", length=60) for i in range(queue_size)]
        return PlaybackState(
            status=status,
            position=position,
            current_track=current if current is not None else make_track(),
            queue=tuple(queue)
        )
    return _make
