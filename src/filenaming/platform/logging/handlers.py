"""Rich logging handlers.

Where: platform/logging/handlers.py
What: Render structured rename records as ``event  source → target`` lines.
Why: Absolute library paths drown the console; relative paths stay readable.
"""

from __future__ import annotations

import logging
from typing import ClassVar, override

from rich.logging import RichHandler
from rich.text import Text


class RenamePathRichHandler(RichHandler):
    """Rich handler that relativizes and abbreviates paths in rename records.

    Records carrying a ``rename_event`` extra are rendered from their
    ``source_path``/``target_path`` extras, relative to ``root_path`` when the
    path lives beneath it. Other records render like a plain ``RichHandler``.
    """

    MAX_PATH_SEGMENTS: ClassVar[int] = 4
    ELLIPSIS: ClassVar[str] = "…"

    def __init__(self, *args: object, **kwargs: object) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)  # pyright: ignore[reportArgumentType]

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        event = getattr(record, "rename_event", None)
        if event is None:
            return super().render_message(record, message)

        root = getattr(record, "root_path", None)
        source = getattr(record, "source_path", None)
        target = getattr(record, "target_path", None)

        text = Text()
        _ = text.append(str(event), style="bold cyan")

        paths = [self.format_path(str(path), root) for path in (source, target) if path]
        if paths:
            _ = text.append("  ")
            _ = text.append(" → ".join(paths), style="white")
        if not paths or record.levelno >= logging.WARNING:
            _ = text.append("  ")
            _ = text.append(message or record.getMessage())
        return text

    @classmethod
    def format_path(cls, path: str, root: object | None = None) -> str:
        """Return ``path`` relative to ``root`` when nested, else abbreviated."""

        if root:
            base = str(root).rstrip("/\\")
            if base and path.startswith(base) and path[len(base) : len(base) + 1] in ("/", "\\"):
                return path[len(base) + 1 :]
        return cls.abbreviate(path)

    @classmethod
    def abbreviate(cls, path: str) -> str:
        """Shorten long absolute paths to their last few segments."""

        separator = "\\" if "\\" in path and "/" not in path else "/"
        is_absolute = path.startswith(separator) or path[1:3] in (":\\", ":/")
        segments = [segment for segment in path.split(separator) if segment]
        if not is_absolute or len(segments) <= cls.MAX_PATH_SEGMENTS:
            return path
        return cls.ELLIPSIS + separator + separator.join(segments[-cls.MAX_PATH_SEGMENTS :])


__all__ = ["RenamePathRichHandler"]
