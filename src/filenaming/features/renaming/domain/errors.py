"""
Summary: Exception hierarchy for rename requests and per-item rename failures.
Why: Callers distinguish request-fatal errors from failures recorded per file.
"""

from __future__ import annotations


class RenameError(Exception):
    """Base class for rename failures."""


class PatternNotFound(RenameError):
    """Raised when a rename request references an unknown naming pattern."""

    def __init__(self, pattern_id: int | None) -> None:
        self.pattern_id = pattern_id
        if pattern_id is None:
            message = "No active naming pattern found"
        else:
            message = f"Naming pattern with ID {pattern_id} not found"
        super().__init__(message)


class NoFilesSelected(RenameError):
    """Raised when a rename request selects no media files."""

    def __init__(self, message: str = "No media files selected for renaming") -> None:
        super().__init__(message)


class CommitFailed(RenameError):
    """Raised when finished renames could not be written to the library store."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to save rename results: {reason}")


class RenameItemError(RenameError):
    """Failure confined to a single media file; the batch continues."""


class NoFilePath(RenameItemError):
    def __init__(self) -> None:
        super().__init__("Media file has no path")


class StorageRootNotFound(RenameItemError):
    def __init__(self, path: str | None) -> None:
        self.path = path
        super().__init__(f"No storage root found for path: {path}")


class SourceFileMissing(RenameItemError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Source file not found: {path}")


class DirectoryCreateFailed(RenameItemError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to create directory {path}: {reason}")


class RenameFailed(RenameItemError):
    def __init__(self, source: str, destination: str, reason: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Failed to move {source} to {destination}: {reason}")


class SidecarMoveFailed(RenameItemError):
    def __init__(self, source: str, destination: str, reason: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Failed to move sidecar {source} to {destination}: {reason}")


class DuplicateStorageRootError(ValueError):
    """Raised when two storage roots share the same normalized path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Storage root path configured more than once: {path}")


__all__ = [
    "CommitFailed",
    "DirectoryCreateFailed",
    "DuplicateStorageRootError",
    "NoFilePath",
    "NoFilesSelected",
    "PatternNotFound",
    "RenameError",
    "RenameFailed",
    "RenameItemError",
    "SidecarMoveFailed",
    "SourceFileMissing",
    "StorageRootNotFound",
]
