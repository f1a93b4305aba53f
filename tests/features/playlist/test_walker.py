"""
Summary: Verify breadth-first media discovery and per-level ordering.
Why: Track order in every playlist is decided by the walker.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from xspfgen.config import MediaProfile, PlaylistConfig, SortPolicy
from xspfgen.features.playlist import MediaFile, media_files_from_paths, walk


def _relative(root: Path, media: list[MediaFile]) -> list[str]:
    return [item.path.relative_to(root.resolve()).as_posix() for item in media]


def test_walk_is_breadth_first_with_sorted_levels(make_tree: Callable[..., Path]) -> None:
    """Shallow files come before deeper ones; each level is sorted by name."""

    root = make_tree(
        "Show",
        {
            "b.mp4": None,
            "a.mkv": None,
            "notes.txt": None,
            "sub2/y.webm": None,
            "sub1/x.mp4": None,
            "sub1/deep/z.mp4": None,
        },
    )

    result = _relative(root, list(walk(root, PlaylistConfig())))

    assert result == ["a.mkv", "b.mp4", "sub1/x.mp4", "sub2/y.webm", "sub1/deep/z.mp4"]


def test_walk_length_then_name_policy(make_tree: Callable[..., Path]) -> None:
    root = make_tree("Show", {"10.mp4": None, "9.mp4": None, "bb/1.mp4": None, "a/2.mp4": None})

    by_name = _relative(root, list(walk(root, PlaylistConfig())))
    by_length = _relative(
        root, list(walk(root, PlaylistConfig(sort_policy=SortPolicy.LENGTH_THEN_NAME)))
    )

    assert by_name == ["10.mp4", "9.mp4", "a/2.mp4", "bb/1.mp4"]
    assert by_length == ["9.mp4", "10.mp4", "a/2.mp4", "bb/1.mp4"]


def test_walk_matches_extensions_case_sensitively(make_tree: Callable[..., Path]) -> None:
    root = make_tree("Show", {"clip.MP4": None, "clip.mp4": None, "song.mp3": None})

    video = _relative(root, list(walk(root, PlaylistConfig())))
    media = _relative(root, list(walk(root, PlaylistConfig.for_profile(MediaProfile.MEDIA))))

    assert video == ["clip.mp4"]
    assert media == ["clip.mp4", "song.mp3"]


def test_walk_finds_exactly_the_accepted_files_at_any_depth(make_tree: Callable[..., Path]) -> None:
    layout: dict[str, str | bytes | None] = {}
    expected: set[str] = set()
    for depth in range(5):
        prefix = "/".join(f"d{level}" for level in range(depth))
        for name in ("ep.mkv", "ep.jpg", "ep.description", "other.webm"):
            relative = f"{prefix}/{name}" if prefix else name
            layout[relative] = None
            if name.endswith((".mkv", ".webm")):
                expected.add(relative)
    root = make_tree("Deep", layout)

    found = _relative(root, list(walk(root, PlaylistConfig())))

    assert len(found) == len(expected)
    assert set(found) == expected


def test_walk_empty_root_yields_nothing(tmp_path: Path) -> None:
    root = tmp_path / "Empty"
    root.mkdir()

    assert list(walk(root, PlaylistConfig())) == []


def test_walk_rejects_non_directory_lazily(tmp_path: Path) -> None:
    """The generator only fails once it is consumed."""

    missing = tmp_path / "missing"
    generator = walk(missing, PlaylistConfig())

    with pytest.raises(NotADirectoryError):
        _ = next(generator)


def test_media_files_from_paths_keeps_order_and_skips_filtering(tmp_path: Path) -> None:
    first = tmp_path / "z.txt"
    second = tmp_path / "a.mp4"
    first.touch()
    second.touch()

    result = list(media_files_from_paths([first, second]))

    assert [item.path for item in result] == [first, second]
    assert result[0].directory == tmp_path
    assert result[1].title == "a"


def test_media_files_from_paths_keeps_symlink_paths(tmp_path: Path) -> None:
    target = tmp_path / "store" / "real.mp4"
    target.parent.mkdir()
    target.touch()
    link = tmp_path / "Show" / "linked.mp4"
    link.parent.mkdir()
    link.symlink_to(target)

    (media,) = media_files_from_paths([link])

    assert media.path == link
    assert media.directory == tmp_path / "Show"
    assert media.title == "linked"
