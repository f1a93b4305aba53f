"""
Summary: Turn filesystem paths into percent-encoded relative location URIs.
Why: Playlist locations must survive spaces, '#' and other reserved characters.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from xspfgen.config.settings import URI_SAFE_CHARACTERS

from .errors import PathContainmentError


def escape_segment(segment: str) -> str:
    """Percent-encode one path segment.

    '/', '#', '?', '%' and spaces are always encoded, as is every non-ASCII
    character (as UTF-8).
    """

    return quote(segment, safe=URI_SAFE_CHARACTERS)


def relative_parts(path: Path, root: Path) -> tuple[str, ...]:
    """Return the segments of ``path`` below ``root``.

    Raises:
        PathContainmentError: If ``path`` is not located under ``root``.
    """

    try:
        relative = path.relative_to(root)
    except ValueError as exc:
        raise PathContainmentError(path, root) from exc
    if not relative.parts:
        raise PathContainmentError(path, root)
    return relative.parts


def location_for(path: Path, root: Path, base: Path) -> str:
    """Build the location URI of ``path`` as seen from the playlist directory.

    ``path`` must live under ``root``; the URI is relative to ``base``, the
    directory holding the playlist, which is ``root`` itself or one of its
    ancestors.
    """

    _ = relative_parts(path, root)
    return "/".join(escape_segment(part) for part in relative_parts(path, base))


def directory_location(path: Path) -> str:
    """Build a ``<directory-name>/<file-name>`` location for a loose file."""

    parts = (path.parent.name, path.name) if path.parent.name else (path.name,)
    return "/".join(escape_segment(part) for part in parts)


__all__ = ["directory_location", "escape_segment", "location_for", "relative_parts"]
