"""Rich console handler for playlist generation events.

Where: platform/logging/handlers.py
What: Render structured playlist events with icons, colours and compact paths.
Why: Keep console output readable when scanning deep media trees.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PlaylistRichHandler(RichHandler):
    """Rich handler that styles playlist events and shortens paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "playlist.start": ("🚀", "cyan"),
        "playlist.track": ("🎞️", "blue"),
        "playlist.complete": ("✅", "green"),
        "playlist.empty": ("ℹ️", "yellow"),
        "playlist.error": ("❌", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with fixed presentation settings."""
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with coloured separators.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled path, truncated to the last few segments.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string = "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured playlist events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        root = getattr(record, "root", None)
        base = str(root) if root else None

        if event == "playlist.track":
            track_num = getattr(record, "track_num", None)
            if isinstance(track_num, int):
                _ = body.append(f"[{track_num}] ")
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path), base=base))
            details: list[str] = []
            if getattr(record, "has_annotation", False):
                details.append("annotation")
            images = getattr(record, "image_count", None)
            if isinstance(images, int) and images > 0:
                details.append(f"images={images}")
            if details:
                _ = body.append(" (" + ", ".join(details) + ")")
        else:
            label = {
                "playlist.start": "Playlist start",
                "playlist.complete": "Playlist written",
                "playlist.empty": "No media files",
                "playlist.error": "Playlist failed",
            }.get(event, event)
            _ = body.append(label)

            metrics: list[str] = []
            track_count = getattr(record, "track_count", None)
            if isinstance(track_count, int):
                metrics.append(f"tracks={track_count}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            error_message = getattr(record, "error_message", None)
            if error_message:
                metrics.append(str(error_message))
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")

            output_path = getattr(record, "output_path", None)
            if event == "playlist.complete" and output_path:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(output_path)))
            elif root:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(root)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for playlist events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PlaylistRichHandler"]
