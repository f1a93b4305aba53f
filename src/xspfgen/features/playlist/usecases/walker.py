"""
Summary: Breadth-first discovery of media files below a root directory.
Why: Track order depends only on directory depth and the configured sort key.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path

from xspfgen.config import PlaylistConfig
from xspfgen.features.playlist.domain import MediaFile


def walk(root: Path, config: PlaylistConfig) -> Iterator[MediaFile]:
    """Yield accepted media files below ``root`` level by level.

    Each directory's subdirectories are queued in sorted order before its own
    matching files are yielded, also sorted. The generator is single-pass;
    errors raised while listing a directory propagate to the consumer.

    Raises:
        NotADirectoryError: If ``root`` is not a directory.
    """

    root = Path(root).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    pending: deque[Path] = deque([root])
    while pending:
        current = pending.popleft()
        entries = list(current.iterdir())

        directories = [entry for entry in entries if entry.is_dir()]
        pending.extend(_sorted(directories, config))

        files = [
            entry
            for entry in entries
            if entry.is_file() and config.accepts(entry.suffix)
        ]
        for path in _sorted(files, config):
            yield MediaFile(path)


def media_files_from_paths(paths: Iterable[Path | str]) -> Iterator[MediaFile]:
    """Wrap explicitly supplied file paths, keeping their order."""

    for path in paths:
        yield MediaFile.from_path(path)


def _sorted(entries: list[Path], config: PlaylistConfig) -> list[Path]:
    return sorted(entries, key=lambda entry: config.sort_policy.key(entry.name))


__all__ = ["media_files_from_paths", "walk"]
