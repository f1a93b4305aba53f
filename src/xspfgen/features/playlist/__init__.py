"""
Summary: Playlist feature package exports.
Why: Give callers one import surface for domain types and use cases.
"""

from .domain import (
    InvalidXmlTextError,
    MediaFile,
    PathContainmentError,
    PlaylistError,
    PlaylistSummary,
    Sidecars,
    Track,
)
from .usecases import PlaylistEvent, media_files_from_paths, resolve_sidecars, walk, write_playlist

__all__ = [
    "InvalidXmlTextError",
    "MediaFile",
    "PathContainmentError",
    "PlaylistError",
    "PlaylistEvent",
    "PlaylistSummary",
    "Sidecars",
    "Track",
    "media_files_from_paths",
    "resolve_sidecars",
    "walk",
    "write_playlist",
]
