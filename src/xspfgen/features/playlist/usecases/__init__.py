"""
Summary: Walk, resolve and write steps of playlist generation.
Why: Expose the pipeline pieces under one import path.
"""

from .events import PlaylistEvent
from .sidecars import read_annotation, resolve_sidecars, sidecar_group
from .walker import media_files_from_paths, walk
from .writer import build_tracks, playlist_output_path, write_playlist

__all__ = [
    "PlaylistEvent",
    "build_tracks",
    "media_files_from_paths",
    "playlist_output_path",
    "read_annotation",
    "resolve_sidecars",
    "sidecar_group",
    "walk",
    "write_playlist",
]
