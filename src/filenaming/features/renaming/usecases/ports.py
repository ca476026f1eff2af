"""
Summary: Ports consumed by the renaming use cases.
Why: Keep persistence and filesystem access swappable for tests and other hosts.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from filenaming.shared.library import MediaFile, NamingPattern, StorageRoot, Track


class MediaFileRepository(Protocol):
    """Load and persist media files with their track graph attached."""

    def get_media_files(self, media_file_ids: Iterable[int]) -> list[MediaFile]:
        """Return files for ``media_file_ids``; unknown ids are omitted."""

        ...

    def get_media_file(self, media_file_id: int) -> MediaFile | None:
        ...

    def get_track(self, track_id: int) -> Track | None:
        ...

    def get_files_needing_rename(self) -> list[MediaFile]:
        ...

    def iter_media_file_pages(self, page_size: int) -> Iterable[Sequence[MediaFile]]:
        """Yield every media file in pages of at most ``page_size``."""

        ...

    def count_by_rename_flag(self, needs_rename: bool) -> int:
        ...

    def save(self, media_file: MediaFile) -> None:
        """Stage path, flag and sidecar mutations of ``media_file``."""

        ...

    def commit(self) -> None:
        ...

    def clear(self) -> None:
        """Release any loaded entities held by the repository."""

        ...


class StorageRootRepository(Protocol):
    """Provide configured storage roots."""

    def get_storage_roots(self) -> list[StorageRoot]:
        ...


class NamingPatternRepository(Protocol):
    """Provide naming patterns."""

    def get_pattern(self, pattern_id: int) -> NamingPattern | None:
        ...

    def get_active_pattern(self) -> NamingPattern | None:
        """Return the default active pattern, or the first active one."""

        ...


class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the executor."""

    def exists(self, path: Path) -> bool:
        ...

    def same_file(self, first: Path, second: Path) -> bool:
        """Return True when ``first`` and ``second`` address the same entry."""

        ...

    def ensure_parent(self, path: Path) -> Path:
        """Ensure the parent directory exists and return it."""

        ...

    def move(self, source: Path, destination: Path) -> None:
        ...


__all__ = [
    "FileSystemGateway",
    "MediaFileRepository",
    "NamingPatternRepository",
    "StorageRootRepository",
]
