# ===== BASE EXCEPTION =====

class TunedeckException(Exception):
    """Base exception for tunedeck."""
    pass

# ===== INFRASTRUCTURE ERRORS =====

class ConfigurationError(TunedeckException):
    """Configuration error."""
    def __init__(self, key, value, expected=None):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {key}: {value!r}" +
                        (f" (expected {expected})" if expected else ""))

# ===== PANEL ERRORS =====

class PanelError(TunedeckException):
    """A panel could not be rendered from the given playback state."""
    pass

class EmptyPlaybackError(PanelError):
    """No current track when a now-playing panel was requested."""
    def __init__(self):
        super().__init__("No playing song found")

class EmptyQueueError(PanelError):
    """No current track when a queue panel was requested."""
    def __init__(self):
        super().__init__("Queue is empty")

class PageOutOfRangeError(PanelError):
    """Requested queue page is past the last page."""
    def __init__(self, page, max_page):
        self.page = page
        self.max_page = max_page
        super().__init__(f"Page {page} is out of range (1-{max_page})")
