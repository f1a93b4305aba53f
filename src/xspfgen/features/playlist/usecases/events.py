"""
Summary: Structured event identifiers for playlist generation logs.
Why: Let the console handler style events without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum


class PlaylistEvent(StrEnum):
    """Event names attached to log records as ``processing_event``."""

    START = "playlist.start"
    TRACK = "playlist.track"
    COMPLETE = "playlist.complete"
    EMPTY = "playlist.empty"
    ERROR = "playlist.error"


__all__ = ["PlaylistEvent"]
