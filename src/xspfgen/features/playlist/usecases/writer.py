"""
Summary: Stream an XSPF document for an ordered sequence of media files.
Why: Emit tracks one at a time and never leave a partial playlist behind.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Any

from lxml import etree

from xspfgen.config import OutputPlacement, PlaylistConfig
from xspfgen.config.settings import PLAYLIST_SUFFIX, XSPF_NAMESPACE, XSPF_VERSION
from xspfgen.features.playlist.domain import (
    InvalidXmlTextError,
    MediaFile,
    PlaylistSummary,
    Track,
    directory_location,
    location_for,
)
from xspfgen.platform.logging import logger

from .events import PlaylistEvent
from .sidecars import resolve_sidecars


def playlist_output_path(root: Path, config: PlaylistConfig) -> Path:
    """Return ``<root-name>.xspf`` placed according to ``config.output_placement``."""

    root = Path(root).resolve()
    directory = root.parent if config.output_placement is OutputPlacement.PARENT else root
    return directory / f"{root.name}{PLAYLIST_SUFFIX}"


def build_tracks(
    root: Path,
    base: Path,
    media_files: Iterable[MediaFile],
    config: PlaylistConfig,
    *,
    loose_files: bool = False,
) -> Iterator[Track]:
    """Number media files and resolve their sidecars, one track at a time.

    With ``loose_files`` a file outside ``root`` is located as
    ``<directory-name>/<file-name>`` instead of failing containment.
    """

    def _locate(path: Path) -> str:
        if loose_files and not path.is_relative_to(root):
            return directory_location(path)
        return location_for(path, root, base)

    for number, media in enumerate(media_files, start=config.track_start):
        sidecars = resolve_sidecars(media, config)
        track = Track(
            number=number,
            title=media.title,
            location=_locate(media.path),
            annotation=sidecars.annotation,
            images=tuple(_locate(image) for image in sidecars.images),
        )
        logger.debug(
            "Track %d: %s",
            number,
            media.path,
            extra={
                "processing_event": PlaylistEvent.TRACK.value,
                "track_num": number,
                "source_path": str(media.path),
                "root": str(root),
                "has_annotation": track.annotation is not None,
                "image_count": len(track.images),
            },
        )
        yield track


def write_playlist(
    root: Path,
    media_files: Iterable[MediaFile],
    config: PlaylistConfig,
    *,
    loose_files: bool = False,
) -> PlaylistSummary:
    """Write the playlist for ``root`` and return what was written.

    The document is streamed into a temporary file beside the destination and
    moved into place only once complete. A new playlist gets the mode a plain
    file would get under the current umask; a replaced one keeps its mode. On
    any failure the temporary file is removed and an existing playlist at the
    destination is left untouched.

    Raises:
        PathContainmentError: If a media file lies outside ``root``.
        InvalidXmlTextError: If a field holds characters XML 1.0 forbids.
        OSError: On any read or write failure.
    """

    root = Path(root).resolve()
    output_path = playlist_output_path(root, config)
    tracks = build_tracks(
        root, output_path.parent, media_files, config, loose_files=loose_files
    )

    handle = tempfile.NamedTemporaryFile(
        "wb",
        dir=output_path.parent,
        prefix=f".{output_path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temporary_path = Path(handle.name)
    try:
        with handle:
            track_count = _write_document(handle, root.name, tracks, config.indent)
        temporary_path.chmod(_output_mode(output_path))
        _ = temporary_path.replace(output_path)
    except BaseException:
        temporary_path.unlink(missing_ok=True)
        raise

    return PlaylistSummary(root=root, output_path=output_path, track_count=track_count)


def _output_mode(output_path: Path) -> int:
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    _ = os.umask(umask)
    return 0o666 & ~umask


def _tag(name: str) -> str:
    return f"{{{XSPF_NAMESPACE}}}{name}"


def _write_document(handle: IO[bytes], title: str, tracks: Iterable[Track], indent: str) -> int:
    count = 0
    with etree.xmlfile(handle, encoding="utf-8") as xf:
        xf.write_declaration()
        with xf.element(_tag("playlist"), {"version": XSPF_VERSION}, nsmap={None: XSPF_NAMESPACE}):
            _write_leaf(xf, "title", title, 1, indent)
            xf.write("\n" + indent)
            with xf.element(_tag("trackList")):
                for track in tracks:
                    _write_track(xf, track, indent)
                    count += 1
                xf.write("\n" + indent)
            xf.write("\n")
    _ = handle.write(b"\n")
    return count


def _write_track(xf: Any, track: Track, indent: str) -> None:
    xf.write("\n" + indent * 2)
    with xf.element(_tag("track")):
        _write_leaf(xf, "trackNum", str(track.number), 3, indent)
        _write_leaf(xf, "title", track.title, 3, indent)
        _write_leaf(xf, "location", track.location, 3, indent)
        if track.annotation is not None:
            _write_leaf(xf, "annotation", track.annotation, 3, indent)
        for image in track.images:
            _write_leaf(xf, "image", image, 3, indent)
        xf.write("\n" + indent * 2)


def _write_leaf(xf: Any, name: str, text: str, depth: int, indent: str) -> None:
    xf.write("\n" + indent * depth)
    with xf.element(_tag(name)):
        if text:
            try:
                xf.write(text)
            except ValueError as exc:
                raise InvalidXmlTextError(name, text) from exc


__all__ = ["build_tracks", "playlist_output_path", "write_playlist"]
