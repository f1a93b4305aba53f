"""
Summary: Verify sidecar lookup for descriptions and cover images.
Why: Annotations and images must come only from same-stem siblings.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from xspfgen.config import PlaylistConfig
from xspfgen.features.playlist import MediaFile, resolve_sidecars
from xspfgen.features.playlist.usecases import sidecar_group
import xspfgen.features.playlist.usecases.sidecars as sidecars_module


def test_resolve_sidecars_reads_description_and_images(make_tree: Callable[..., Path]) -> None:
    root = make_tree(
        "Show",
        {
            "01 Intro.mp4": None,
            "01 Intro.description": "Pilot episode",
            "01 Intro.png": None,
            "01 Intro.jpg": None,
            "01 Intro.jpeg": None,
        },
    )

    result = resolve_sidecars(MediaFile.from_path(root / "01 Intro.mp4"), PlaylistConfig())

    assert result.annotation == "Pilot episode"
    assert [path.name for path in result.images] == [
        "01 Intro.jpeg",
        "01 Intro.jpg",
        "01 Intro.png",
    ]


def test_resolve_sidecars_without_siblings(make_tree: Callable[..., Path]) -> None:
    root = make_tree(
        "Show",
        {
            "02 Bonus.mkv": None,
            "02 Bonus extra.jpg": None,
            "02.jpg": None,
            "02 Bonus.mkv.description": "belongs to another stem",
        },
    )

    result = resolve_sidecars(MediaFile.from_path(root / "02 Bonus.mkv"), PlaylistConfig())

    assert result.annotation is None
    assert result.images == ()


def test_annotation_text_is_kept_verbatim(make_tree: Callable[..., Path]) -> None:
    """Line endings survive and a UTF-8 byte order mark is dropped."""

    root = make_tree(
        "Show",
        {
            "ep.webm": None,
            "ep.description": b"\xef\xbb\xbf" + "Line one\r\nLine two \u00fcn\u00efcode\n".encode("utf-8"),
        },
    )

    result = resolve_sidecars(MediaFile.from_path(root / "ep.webm"), PlaylistConfig())

    assert result.annotation == "Line one\r\nLine two \u00fcn\u00efcode\n"


def test_image_extensions_follow_configuration(make_tree: Callable[..., Path]) -> None:
    root = make_tree("Show", {"ep.mp4": None, "ep.jpg": None, "ep.png": None})
    config = PlaylistConfig(image_extensions=frozenset({".jpg"}))

    result = resolve_sidecars(MediaFile.from_path(root / "ep.mp4"), config)

    assert [path.name for path in result.images] == ["ep.jpg"]


def test_sidecar_group_excludes_media_file_and_directories(make_tree: Callable[..., Path]) -> None:
    root = make_tree("Show", {"ep.mp4": None, "ep.jpg": None, "ep.srt/inner.txt": None})

    group = sidecar_group(MediaFile.from_path(root / "ep.mp4"))

    assert list(group) == [".jpg"]


def test_unreadable_description_propagates(
    make_tree: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    root = make_tree("Show", {"ep.mp4": None, "ep.description": "text"})

    def _deny(path: Path) -> str:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(sidecars_module, "read_annotation", _deny)

    with pytest.raises(PermissionError):
        _ = resolve_sidecars(MediaFile.from_path(root / "ep.mp4"), PlaylistConfig())
