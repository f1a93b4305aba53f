"""
Summary: Exceptions raised by playlist generation.
Why: Separate invariant violations from ordinary I/O failures.
"""

from __future__ import annotations

from pathlib import Path


class PlaylistError(Exception):
    """Base class for playlist generation errors."""


class PathContainmentError(PlaylistError, ValueError):
    """Raised when a file cannot be expressed relative to its playlist root."""

    def __init__(self, path: Path, root: Path) -> None:
        super().__init__(f"{path} is not located under playlist root {root}")
        self.path: Path = path
        self.root: Path = root


class InvalidXmlTextError(PlaylistError):
    """Raised when a playlist field holds characters XML 1.0 cannot carry."""

    def __init__(self, field_name: str, text: str) -> None:
        super().__init__(f"{field_name} contains characters not allowed in XML: {text!r}")
        self.field_name: str = field_name
        self.text: str = text


__all__ = ["InvalidXmlTextError", "PathContainmentError", "PlaylistError"]
