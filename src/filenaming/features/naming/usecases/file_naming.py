"""
Summary: Compute canonical relative paths for tracks from a naming pattern.
Why: Decision, preview and execution all share one rendering pipeline.
"""

from __future__ import annotations

from typing import final

from filenaming.shared.library import MediaFile, Track

from ..domain.sanitizer import PathSanitizer
from ..domain.template import PatternRenderer
from ..domain.variables import NamingDefaults, VariableBuilder


@final
class FileNaming:
    """Render, sanitize and verify canonical file paths.

    Pure: no filesystem access happens here, paths are compared as strings.
    """

    def __init__(self, defaults: NamingDefaults | None = None) -> None:
        self.defaults = defaults or NamingDefaults()
        self.variables = VariableBuilder(self.defaults)
        self.sanitizer = PathSanitizer(self.defaults.fallback_extension)

    def render_path(self, track: Track, pattern: str, media_file: MediaFile | None = None) -> str:
        """Return the sanitized relative path ``pattern`` yields for ``track``.

        Args:
            track: Track providing the metadata.
            pattern: Naming pattern text.
            media_file: File to describe; defaults to the track's first file.

        Returns:
            str: Relative path such as ``Artist/Album/01 - Title.flac``.
        """
        variables = self.variables.build(track, media_file)
        rendered = PatternRenderer.render(pattern, variables, {"track": track})
        return self.sanitizer.sanitize_path(rendered, fallback_pattern=pattern)

    def canonical_path(
        self,
        root_path: str,
        track: Track,
        pattern: str,
        media_file: MediaFile | None = None,
    ) -> str:
        """Join ``root_path`` with the rendered relative path."""

        return join_root(root_path, self.render_path(track, pattern, media_file))

    def has_correct_format(self, track: Track, pattern: str, root_path: str) -> bool:
        """Return True when any of ``track``'s files already sits at its canonical path."""

        return any(
            self.has_correct_format_for_file(track, pattern, media_file, root_path)
            for media_file in track.files
            if media_file.path
        )

    def has_correct_format_for_file(
        self,
        track: Track,
        pattern: str,
        media_file: MediaFile,
        root_path: str,
    ) -> bool:
        if not media_file.path:
            return False
        return media_file.path == self.canonical_path(root_path, track, pattern, media_file)


def join_root(root_path: str, relative_path: str) -> str:
    """Join a storage root and a relative path with exactly one separator."""

    root = root_path.rstrip("/")
    return f"{root}/{relative_path.lstrip('/')}"


__all__ = ["FileNaming", "join_root"]
