"""
Summary: Find description and artwork files sharing a media file's base name.
Why: Sidecar files carry the annotation and images of each track.
"""

from __future__ import annotations

from pathlib import Path

from xspfgen.config import PlaylistConfig
from xspfgen.features.playlist.domain import MediaFile, Sidecars


def sidecar_group(media: MediaFile) -> dict[str, list[Path]]:
    """Group the media file's siblings with the same stem by extension."""

    group: dict[str, list[Path]] = {}
    for candidate in media.directory.iterdir():
        if candidate == media.path or candidate.stem != media.path.stem:
            continue
        if not candidate.is_file():
            continue
        group.setdefault(candidate.suffix, []).append(candidate)

    for paths in group.values():
        paths.sort(key=lambda path: path.name)
    return group


def read_annotation(path: Path) -> str:
    """Return the text of a description file, newlines untouched."""

    with path.open("r", encoding="utf-8-sig", newline="") as handle:
        return handle.read()


def resolve_sidecars(media: MediaFile, config: PlaylistConfig) -> Sidecars:
    """Resolve the annotation and images for ``media``.

    At most one annotation is produced. Images are ordered by extension and
    then by file name. Read errors propagate.
    """

    group = sidecar_group(media)

    annotation: str | None = None
    descriptions = group.get(config.description_extension)
    if descriptions:
        annotation = read_annotation(descriptions[0])

    images = tuple(
        path
        for extension in sorted(group)
        if config.is_image(extension)
        for path in group[extension]
    )
    return Sidecars(annotation=annotation, images=images)


__all__ = ["read_annotation", "resolve_sidecars", "sidecar_group"]
