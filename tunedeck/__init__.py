"""Render music playback state into Discord panels."""

__version__ = "0.1.0"
