"""Where: src/xspfgen/config/config.py
What: Immutable playlist generation policy passed to the walker, resolver and writer.
Why: Keep the video-only and combined media variants testable side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Final

from xspfgen.config.settings import (
    AUDIO_EXTENSIONS,
    DEFAULT_DESCRIPTION_EXTENSION,
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_INDENT,
    DEFAULT_TRACK_START,
    VIDEO_EXTENSIONS,
)


class MediaProfile(str, Enum):
    """Named sets of accepted media extensions."""

    VIDEO = "video"
    MEDIA = "media"

    @property
    def extensions(self) -> frozenset[str]:
        """Return the accepted extensions for this profile."""

        if self is MediaProfile.VIDEO:
            return VIDEO_EXTENSIONS
        return VIDEO_EXTENSIONS | AUDIO_EXTENSIONS

    @staticmethod
    def from_user_input(value: str) -> "MediaProfile":
        """Translate raw input into the matching profile."""

        normalized = value.strip().lower()
        for profile in MediaProfile:
            if profile.value == normalized:
                return profile
        valid: Final[str] = ", ".join(p.value for p in MediaProfile)
        msg = f"Unsupported media profile '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class SortPolicy(str, Enum):
    """Ordering applied to directories and files at each level of the walk."""

    NAME = "name"
    LENGTH_THEN_NAME = "length_then_name"

    def key(self, name: str) -> tuple[int, str] | str:
        """Return the sort key for an entry name."""

        if self is SortPolicy.LENGTH_THEN_NAME:
            return (len(name), name)
        return name


class OutputPlacement(str, Enum):
    """Where the playlist file is written relative to its root directory."""

    PARENT = "parent"
    INSIDE_ROOT = "inside_root"


def _extension_set(default: frozenset[str]) -> Any:
    return field(default=default, metadata={"extensions": True})


@dataclass(frozen=True, slots=True)
class PlaylistConfig:
    """Policy values for one playlist generation run."""

    accepted_extensions: frozenset[str] = _extension_set(VIDEO_EXTENSIONS)
    image_extensions: frozenset[str] = _extension_set(DEFAULT_IMAGE_EXTENSIONS)
    description_extension: str = DEFAULT_DESCRIPTION_EXTENSION
    sort_policy: SortPolicy = SortPolicy.NAME
    output_placement: OutputPlacement = OutputPlacement.PARENT
    track_start: int = DEFAULT_TRACK_START
    indent: str = DEFAULT_INDENT

    def __post_init__(self) -> None:
        """Normalise extension collections and validate boundaries."""

        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("extensions", False):
                continue
            value = frozenset(getattr(self, f.name))
            for extension in value:
                _check_extension(extension)
            object.__setattr__(self, f.name, value)

        _check_extension(self.description_extension)
        if self.track_start < 0:
            raise ValueError(f"track_start must not be negative; received {self.track_start}")

    @classmethod
    def for_profile(cls, profile: MediaProfile | str, **overrides: Any) -> "PlaylistConfig":
        """Build a configuration accepting the extensions of ``profile``."""

        if isinstance(profile, str) and not isinstance(profile, MediaProfile):
            profile = MediaProfile.from_user_input(profile)
        return replace(cls(accepted_extensions=profile.extensions), **overrides)

    def accepts(self, suffix: str) -> bool:
        """Return whether a file suffix names a playable media file."""

        return suffix in self.accepted_extensions

    def is_image(self, suffix: str) -> bool:
        """Return whether a file suffix names cover artwork."""

        return suffix in self.image_extensions


def _check_extension(extension: str) -> None:
    if not extension.startswith(".") or len(extension) < 2:
        raise ValueError(f"Extensions must start with a dot: {extension!r}")


__all__ = ["MediaProfile", "OutputPlacement", "PlaylistConfig", "SortPolicy"]
