"""
Summary: Rich console handler rendering copy events and user notices.
Why: Keep console formatting out of the use cases, which only attach extras.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CopyEventRichHandler(RichHandler):
    """Rich handler that styles copy events and user notices.

    Records carrying a ``copy_event`` extra are rendered as one-line event
    summaries. Records carrying a ``notice`` extra are user-facing messages and
    are rendered verbatim (no markup) in the color of their level.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "copy.batch.start": ("🚀", "cyan"),
        "copy.batch.complete": ("✅", "green"),
        "copy.batch.cancelled": ("⏹️", "yellow"),
        "copy.destination.created": ("📁", "cyan"),
        "copy.item.conflict": ("⚠️", "yellow"),
        "copy.item.success": ("📦", "green"),
        "copy.item.skip": ("↪️", "yellow"),
        "copy.item.error": ("⛔", "red"),
    }
    _NOTICE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "info": ("ℹ️", "green"),
        "warning": ("⚠️", "yellow"),
        "error": ("❌", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
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
        if anchor:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
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
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_copy_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured copy events with dedicated styling."""

        event = getattr(record, "copy_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        destination = getattr(record, "destination", None)

        if event.startswith("copy.batch"):
            total = getattr(record, "total_items", None)
            copied = getattr(record, "copied", None)
            skipped = getattr(record, "skipped", None)
            label = {
                "copy.batch.start": "Copy start",
                "copy.batch.complete": "Copy complete",
                "copy.batch.cancelled": "Copy cancelled",
            }.get(event, "Copy")
            _ = body.append(label)
            metrics: list[str] = []
            if isinstance(total, int):
                metrics.append(f"total={total}")
            if isinstance(copied, int):
                metrics.append(f"copied={copied}")
            if isinstance(skipped, int):
                metrics.append(f"skipped={skipped}")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
            if destination:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(destination)))
        elif event == "copy.destination.created":
            _ = body.append("Created destination ")
            if destination:
                _ = body.append_text(self._format_path(str(destination)))
        else:
            sequence = getattr(record, "sequence", None)
            total = getattr(record, "total_items", None)
            if isinstance(sequence, int) and sequence > 0:
                if isinstance(total, int) and total > 0:
                    _ = body.append(f"[{sequence}/{total}] ")
                else:
                    _ = body.append(f"[{sequence}] ")

            prefix = {
                "copy.item.conflict": "Conflict ",
                "copy.item.success": "Copied ",
                "copy.item.skip": "Skipped ",
                "copy.item.error": "Failed ",
            }.get(event)
            if prefix:
                _ = body.append(prefix)

            source_path = getattr(record, "source_path", None)
            target_path = getattr(record, "target_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path)))
            if event == "copy.item.success" and target_path:
                _ = body.append(" → ")
                _ = body.append_text(
                    self._format_path(str(target_path), base=str(destination) if destination else None)
                )

            reason = getattr(record, "reason", None)
            if reason:
                _ = body.append(f" ({reason})")

        _ = text.append_text(body)
        return text

    def _render_notice(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render user-facing notices as plain colored text."""

        notice = getattr(record, "notice", None)
        if not isinstance(notice, str):
            return None

        icon, color = self._NOTICE_STYLES.get(notice, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for copy events and notices."""

        event_text = self._render_copy_event(record)
        if event_text is not None:
            return event_text

        notice_text = self._render_notice(record, message)
        if notice_text is not None:
            return notice_text

        return super().render_message(record, message)


__all__ = ["CopyEventRichHandler"]
