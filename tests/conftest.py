"""Shared pytest fixtures for building media trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that creates files below ``tmp_path / root_name``.

    Values are written as text when ``str``, as bytes when ``bytes``; ``None``
    creates an empty file.
    """

    def _make_tree(root_name: str, files: dict[str, str | bytes | None]) -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                _ = target.write_bytes(content)
            else:
                _ = target.write_text(content or "", encoding="utf-8")
        return root

    return _make_tree
