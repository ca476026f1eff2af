"""
Summary: Normalize rendered pattern output into filesystem-safe relative paths.
Why: Rendered metadata may carry characters that are illegal or ambiguous on disk.
"""

import re
from typing import ClassVar, final


@final
class PathSanitizer:
    """Sanitize rendered paths and bare file names."""

    # Characters rejected by common filesystems; "/" is a separator and kept.
    UNSAFE_CHARS: ClassVar[re.Pattern[str]] = re.compile(r'[<>:"|?*]')

    WHITESPACE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    SLASHES: ClassVar[re.Pattern[str]] = re.compile(r"/+")
    BACKSLASHES: ClassVar[re.Pattern[str]] = re.compile(r"\\+")
    SEPARATORS: ClassVar[re.Pattern[str]] = re.compile(r"[/\\]+")

    # A whole "." or ".." segment; rendered paths must stay below their root.
    DOT_SEGMENT: ClassVar[re.Pattern[str]] = re.compile(r"(?<![^/\\])\s*\.{1,2}\s*(?![^/\\])")

    # A recognizable extension: a dot followed by 1-5 alphanumerics at the end.
    EXTENSION: ClassVar[re.Pattern[str]] = re.compile(r"\.[A-Za-z0-9]{1,5}$")

    def __init__(self, fallback_extension: str = "mp3") -> None:
        self.fallback_extension = fallback_extension.lstrip(".") or "mp3"

    @classmethod
    def _clean(cls, text: str) -> str:
        text = cls.UNSAFE_CHARS.sub("_", text)
        text = cls.WHITESPACE.sub(" ", text)
        text = cls.SLASHES.sub("/", text)
        text = cls.BACKSLASHES.sub(r"\\", text)
        text = cls.DOT_SEGMENT.sub("_", text)
        return text.strip()

    @classmethod
    def _relative(cls, text: str) -> str:
        return text.lstrip("/\\").strip()

    def sanitize_path(self, rendered: str, fallback_pattern: str | None = None) -> str:
        """Sanitize a rendered path that may contain directory separators.

        Args:
            rendered: Output of the pattern renderer.
            fallback_pattern: Unrendered pattern text used when the rendered
                value sanitizes to nothing.

        Returns:
            str: Relative path, with the fallback extension appended when the
            last segment carries no extension.
        """
        cleaned = self._relative(self._clean(rendered))
        if not cleaned and fallback_pattern:
            cleaned = self._relative(self._clean(fallback_pattern))
        if not cleaned:
            return ""
        return self.ensure_extension(cleaned)

    def sanitize_filename(self, name: str) -> str:
        """Sanitize a bare file name; separators become underscores."""

        cleaned = self._clean(name)
        return self.SEPARATORS.sub("_", cleaned).strip()

    def ensure_extension(self, path: str) -> str:
        last_segment = path.rsplit("/", 1)[-1]
        if self.EXTENSION.search(last_segment):
            return path
        return f"{path}.{self.fallback_extension}"


__all__ = ["PathSanitizer"]
