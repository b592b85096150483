import logging

logger = logging.getLogger(__name__)

class TimeUtils:
    @staticmethod
    def format_mmss(seconds):
        """Format seconds to MM:SS format."""
        if seconds is None:
            return "Unknown"
        minutes, seconds = divmod(int(seconds), 60)
        return f"{minutes}:{seconds:02d}"

    @staticmethod
    def format_duration(seconds) -> str:
        """Format seconds as M:SS, or H:MM:SS once past an hour."""
        total = max(0, int(seconds or 0))
        hours, remainder = divmod(total, 3600)
        if not hours:
            return TimeUtils.format_mmss(remainder)
        minutes, secs = divmod(remainder, 60)
        return f"{hours}:{minutes:02d}:{secs:02d}"

class StringUtils:
    ELLIPSIS = "..."

    @staticmethod
    def truncate(text, max_len):
        """Truncate text to at most max_len characters, breaking on a word boundary when possible."""
        if len(text) <= max_len:
            return text
        if max_len <= len(StringUtils.ELLIPSIS):
            return text[:max_len]
        budget = max_len - len(StringUtils.ELLIPSIS)
        cut = text[:budget]
        head, sep, _ = cut.rpartition(" ")
        # only back off to a space if that keeps at least half the budget
        if sep and text[budget] != " " and len(head.rstrip()) >= budget // 2:
            cut = head
        cut = cut.rstrip()
        logger.debug(f"Truncated text '{text}' to max_len {max_len}")
        return cut + StringUtils.ELLIPSIS

class ProgressBar:
    TRACK = "▬"
    KNOB = "🔘"

    @staticmethod
    def render(width: int, fraction: float) -> str:
        """Render a fixed-width bar with a knob at the given fraction (clamped to [0, 1])."""
        if width <= 0:
            return ""
        fraction = min(1.0, max(0.0, fraction))
        knob = min(int(fraction * width), width - 1)
        return ProgressBar.TRACK * knob + ProgressBar.KNOB + ProgressBar.TRACK * (width - knob - 1)
