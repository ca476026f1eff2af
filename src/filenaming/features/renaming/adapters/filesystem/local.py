"""Filesystem adapter for renaming use cases."""

from __future__ import annotations

import shutil
from pathlib import Path

from filenaming.platform.filesystem import ensure_parent_directory

from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def same_file(self, first: Path, second: Path) -> bool:
        try:
            return first.samefile(second)
        except OSError:
            return False

    def ensure_parent(self, path: Path) -> Path:
        return ensure_parent_directory(path)

    def move(self, source: Path, destination: Path) -> None:
        _ = shutil.move(str(source), str(destination))


__all__ = ["LocalFileSystemGateway"]
