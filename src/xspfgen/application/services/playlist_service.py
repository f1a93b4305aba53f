"""Application service for generating playlists.

This layer sequences one playlist per root and isolates I/O failures so a
broken root does not stop its siblings.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from xspfgen.config import PlaylistConfig
from xspfgen.features.playlist import (
    InvalidXmlTextError,
    MediaFile,
    PlaylistEvent,
    media_files_from_paths,
    walk,
    write_playlist,
)
from xspfgen.features.playlist.usecases import playlist_output_path
from xspfgen.platform.logging import logger

ROOT_FAILURE_EXCEPTIONS: tuple[type[Exception], ...] = (
    OSError,
    UnicodeError,
    InvalidXmlTextError,
)


@dataclass(frozen=True)
class GenerateRequest:
    """Input parameters for a generation run.

    Attributes:
        files: Existing files collected into one playlist rooted at the
            working directory.
        directories: Existing directories, one playlist each.
    """

    files: Sequence[Path] = field(default_factory=tuple)
    directories: Sequence[Path] = field(default_factory=tuple)


@dataclass(slots=True)
class PlaylistResult:
    """Outcome of generating the playlist for one root."""

    root: Path
    output_path: Path
    success: bool
    track_count: int = 0
    error_message: str | None = None


@final
class PlaylistService:
    """Generate playlists for directory roots and loose files."""

    def __init__(self, config: PlaylistConfig | None = None) -> None:
        self.config: PlaylistConfig = config or PlaylistConfig()

    def run(self, request: GenerateRequest) -> list[PlaylistResult]:
        """Process loose files first, then each directory in order."""

        results: list[PlaylistResult] = []
        if request.files:
            results.append(self.generate_for_files(request.files))
        for directory in request.directories:
            results.append(self.generate_for_directory(directory))
        return results

    def generate_for_directory(self, directory: Path) -> PlaylistResult:
        """Walk ``directory`` and write its playlist."""

        root = Path(directory).resolve()
        return self._generate(root, walk(root, self.config))

    def generate_for_files(
        self,
        files: Iterable[Path],
        root: Path | None = None,
    ) -> PlaylistResult:
        """Write one playlist for explicit files, rooted at ``root`` or the cwd.

        Files outside the root are located by their directory and file name.
        """

        resolved_root = Path(root or Path.cwd()).resolve()
        return self._generate(
            resolved_root, media_files_from_paths(files), loose_files=True
        )

    def _generate(
        self,
        root: Path,
        media_files: Iterable[MediaFile],
        *,
        loose_files: bool = False,
    ) -> PlaylistResult:
        output_path = playlist_output_path(root, self.config)
        start = time.perf_counter()
        logger.info(
            "Playlist generation started [root=%s]",
            root,
            extra={"processing_event": PlaylistEvent.START.value, "root": str(root)},
        )

        try:
            summary = write_playlist(root, media_files, self.config, loose_files=loose_files)
        except ROOT_FAILURE_EXCEPTIONS as exc:
            error_message = str(exc) if str(exc) else type(exc).__name__
            logger.error(
                "Playlist generation failed [root=%s, error=%s]",
                root,
                error_message,
                extra={
                    "processing_event": PlaylistEvent.ERROR.value,
                    "root": str(root),
                    "error_message": error_message,
                },
            )
            return PlaylistResult(
                root=root,
                output_path=output_path,
                success=False,
                error_message=error_message,
            )

        if summary.track_count == 0:
            logger.warning(
                "No media files found [root=%s]",
                root,
                extra={"processing_event": PlaylistEvent.EMPTY.value, "root": str(root)},
            )

        logger.info(
            "Playlist written [root=%s, tracks=%d, output=%s]",
            root,
            summary.track_count,
            summary.output_path,
            extra={
                "processing_event": PlaylistEvent.COMPLETE.value,
                "root": str(root),
                "output_path": str(summary.output_path),
                "track_count": summary.track_count,
                "duration_seconds": round(time.perf_counter() - start, 4),
            },
        )
        return PlaylistResult(
            root=summary.root,
            output_path=summary.output_path,
            success=True,
            track_count=summary.track_count,
        )


__all__ = ["GenerateRequest", "PlaylistResult", "PlaylistService", "ROOT_FAILURE_EXCEPTIONS"]
