"""Rich console handler with structured sync event rendering.

Where: platform/logging/handlers.py
What: Render ``sync_event`` log records as compact, coloured status lines.
Why: Keep per-track output readable while a progress bar shares the console.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SyncEventRichHandler(RichHandler):
    """Rich handler that renders sync events with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "sync.scan.complete": ("🔎", "cyan"),
        "sync.scan.subdirectory_error": ("⚠️", "yellow"),
        "sync.batch.start": ("🚀", "cyan"),
        "sync.batch.complete": ("✅", "green"),
        "sync.batch.no_files": ("ℹ️", "yellow"),
        "sync.track.fetch": ("🌐", "blue"),
        "sync.track.skip": ("↪️", "yellow"),
        "sync.track.saved": ("🎵", "green"),
        "sync.track.failed": ("⛔", "red"),
    }
    _TRACK_PREFIXES: ClassVar[dict[str, str]] = {
        "sync.track.fetch": "Fetching ",
        "sync.track.skip": "Skipped ",
        "sync.track.saved": "Saved ",
        "sync.track.failed": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with coloured separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = anchor if isinstance(display_path, PureWindowsPath) else separator
        display_string += separator.join(body_parts)
        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        """Return whether ``path`` can be expressed relative to ``other``."""

        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_sync_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured sync events with dedicated styling."""

        event = getattr(record, "sync_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("sync.track"):
            self._append_track_body(body, record, event)
        else:
            self._append_run_body(body, record, event)

        _ = text.append_text(body)
        return text

    def _append_track_body(self, body: Text, record: logging.LogRecord, event: str) -> None:
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._TRACK_PREFIXES.get(event, ""))

        source_path = getattr(record, "source_path", None)
        source_base_path = getattr(record, "source_base_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=source_base_path))

        sidecar_path = getattr(record, "sidecar_path", None)
        if event == "sync.track.saved" and sidecar_path:
            _ = body.append(" → ")
            _ = body.append(PurePath(str(sidecar_path)).name)

        details: list[str] = []
        reason = getattr(record, "reason", None)
        if reason:
            details.append(str(reason))
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

    def _append_run_body(self, body: Text, record: logging.LogRecord, event: str) -> None:
        directory = getattr(record, "directory", None)
        if event == "sync.scan.complete":
            files = getattr(record, "total_files", None)
            _ = body.append(f"Found {files} audio files" if isinstance(files, int) else "Scan complete")
        elif event == "sync.scan.subdirectory_error":
            _ = body.append("Error reading subdirectory")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        elif event == "sync.batch.start":
            total_files = getattr(record, "total_files", None)
            limit = getattr(record, "concurrency_limit", None)
            _ = body.append("Batch start")
            details: list[str] = []
            if isinstance(total_files, int):
                details.append(f"total={total_files}")
            if isinstance(limit, int):
                details.append(f"jobs={limit}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        elif event == "sync.batch.complete":
            _ = body.append("Batch complete")
            metrics: list[str] = []
            for key in ("success", "failed", "skipped"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "sync.batch.no_files":
            _ = body.append("No audio files found")
        else:
            _ = body.append(record.getMessage())

        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for sync events."""

        sync_text = self._render_sync_message(record)
        if sync_text is not None:
            return sync_text

        return super().render_message(record, message)


__all__ = ["SyncEventRichHandler"]
