"""Rich console handler with structured track-processing rendering.

Where: platform/logging/handlers.py
What: Render ``processing.*`` log events as compact, coloured status lines.
Why: Keep per-track progress readable without formatting in the use cases.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TrackRichHandler(RichHandler):
    """Custom Rich handler that renders track events and paths in white."""

    _PROCESSING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "processing.run.start": ("🚀", "cyan"),
        "processing.run.complete": ("✅", "green"),
        "processing.run.plan": ("📝", "yellow"),
        "processing.track.start": ("🎧", "blue"),
        "processing.track.success": ("🎉", "green"),
        "processing.track.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, truncate: bool = True) -> Text:
        """Format a path with coloured separators, keeping its last segments.

        Args:
            path: Absolute or relative path string to format.
            truncate: Whether to shorten long paths to their last segments.

        Returns:
            Text: Formatted path with an ellipsis prefix when truncated.
        """
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = truncate and len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator + separator.join(body_parts)
        else:
            display_string = separator.join(body_parts) or "."

        return self._style_path_string(display_string, separator)

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

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured processing events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PROCESSING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("processing.run"):
            total_tracks = getattr(record, "total_tracks", None)
            label = {
                "processing.run.start": "Splitting",
                "processing.run.complete": "Split complete",
                "processing.run.plan": "Planned",
            }.get(event, "Run")
            _ = body.append(label)
            if isinstance(total_tracks, int):
                _ = body.append(f" [tracks={total_tracks}]")
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(source_path)))
        else:
            sequence = getattr(record, "sequence", None)
            total_tracks = getattr(record, "total_tracks", None)
            if isinstance(sequence, int) and sequence > 0:
                if isinstance(total_tracks, int) and total_tracks > 0:
                    _ = body.append(f"[{sequence}/{total_tracks}] ")
                else:
                    _ = body.append(f"[{sequence}] ")

            prefix = {
                "processing.track.start": "Processing track ",
                "processing.track.success": "Tagged ",
                "processing.track.error": "Failed ",
            }.get(event)
            if prefix:
                _ = body.append(prefix)

            target_path = getattr(record, "target_path", None)
            if target_path:
                _ = body.append_text(
                    self._format_path(str(target_path), truncate=event != "processing.track.start")
                )

            details: list[str] = []
            if event == "processing.track.start":
                start = getattr(record, "start", None)
                end = getattr(record, "end", None)
                if start:
                    details.append(f"{start} → {end or 'end'}")
            elif event == "processing.track.error":
                error_message = getattr(record, "error_message", None)
                if error_message:
                    details.append(str(error_message))
            if details:
                _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["TrackRichHandler"]
