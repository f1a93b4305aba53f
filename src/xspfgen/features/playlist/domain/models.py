"""
Summary: Value objects flowing from the walker through the playlist writer.
Why: Give discovered files and emitted tracks explicit, immutable shapes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MediaFile:
    """A discovered media file; identity is its absolute path."""

    path: Path

    @property
    def directory(self) -> Path:
        """Directory that contains the file."""

        return self.path.parent

    @property
    def title(self) -> str:
        """Base name without the extension."""

        return self.path.stem

    @classmethod
    def from_path(cls, path: Path | str) -> "MediaFile":
        """Create a media file from any path.

        The path is made absolute and normalised; symlinks are not followed.
        """

        return cls(Path(os.path.abspath(path)))


@dataclass(frozen=True, slots=True)
class Sidecars:
    """Annotation text and artwork found next to a media file."""

    annotation: str | None = None
    images: tuple[Path, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Track:
    """One entry of the emitted track list."""

    number: int
    title: str
    location: str
    annotation: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PlaylistSummary:
    """Describe a playlist that was written to disk."""

    root: Path
    output_path: Path
    track_count: int


__all__ = ["MediaFile", "PlaylistSummary", "Sidecars", "Track"]
