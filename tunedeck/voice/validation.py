import re
from typing import Optional

class MusicValidation:
    VIDEO_ID_RE = re.compile(
        r"(?:youtu\.be/"
        r"|youtube(?:-nocookie)?\.com/(?:(?:watch)?\?(?:.*&)?v=|(?:embed|v|shorts|live)/))"
        r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
    )
    VIDEO_ID_LENGTH = 11

    @classmethod
    def resolve_video_id(cls, url: str) -> Optional[str]:
        """Extract the 11 character video id from a YouTube URL, or None if there is none."""
        if not url:
            return None
        match = cls.VIDEO_ID_RE.search(url)
        return match.group(1) if match else None
