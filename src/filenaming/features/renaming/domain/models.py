"""
Summary: Value objects describing rename classifications, previews and batch outcomes.
Why: Use cases, adapters and the CLI exchange these instead of loose dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Final

DEFAULT_MAX_REPORTED_ERRORS: Final[int] = 3


class RenameReason(StrEnum):
    """Why a media file does or does not need renaming."""

    NO_FILE_PATH = "no_file_path"
    LIBRARY_NOT_FOUND = "library_not_found"
    FILE_IS_CORRECT = "file_is_correct"
    PATH_CHANGE_NEEDED = "path_change_needed"
    FILENAME_CHANGE_NEEDED = "filename_change_needed"


class RenameEvent(StrEnum):
    """Structured event identifiers for rename logs."""

    FILE_MOVE = "rename.file.move"
    FILE_SKIP = "rename.file.skip"
    FILE_ALREADY_AT_TARGET = "rename.file.already_at_target"
    FILE_ERROR = "rename.file.error"
    SIDECAR_MOVE = "rename.sidecar.move"
    SIDECAR_ROLLBACK = "rename.sidecar.rollback"
    SIDECAR_ERROR = "rename.sidecar.error"
    STATUS_UPDATE = "rename.status.update"
    BATCH_COMPLETE = "rename.batch.complete"
    BATCH_COMMIT_ERROR = "rename.batch.commit_error"


@dataclass(slots=True, frozen=True)
class RenameAnalysis:
    """Classification of one media file against its canonical path."""

    needs_rename: bool
    reason: RenameReason
    current_path: str | None
    expected_path: str | None = None
    filename_correct: bool = False
    path_correct: bool = False
    root_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "needsRename": self.needs_rename,
            "reason": self.reason.value,
            "currentPath": self.current_path,
            "expectedPath": self.expected_path,
            "filenameCorrect": self.filename_correct,
            "pathCorrect": self.path_correct,
        }


@dataclass(slots=True, frozen=True)
class RenamedPath:
    """Source and destination of a completed move."""

    source: str
    destination: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.destination}


@dataclass(slots=True)
class RenameItemResult:
    """Outcome of renaming a single media file."""

    media_file_id: int | None
    success: bool
    skipped: bool = False
    source: str | None = None
    destination: str | None = None
    sidecar_destination: str | None = None
    error: str | None = None


@dataclass(slots=True)
class BatchRenameResult:
    """Aggregate of a rename batch; never raised, always returned."""

    items: list[RenameItemResult] = field(default_factory=list)
    max_reported_errors: int = DEFAULT_MAX_REPORTED_ERRORS
    # Set when the moves happened but saving their new paths failed.
    commit_error: str | None = None

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.items if item.success and not item.skipped)

    @property
    def failed_count(self) -> int:
        return sum(1 for item in self.items if not item.success)

    @property
    def skipped_count(self) -> int:
        return sum(1 for item in self.items if item.skipped)

    @property
    def errors(self) -> list[str]:
        errors = [item.error for item in self.items if item.error]
        if self.commit_error:
            errors.append(self.commit_error)
        return errors

    @property
    def renamed(self) -> list[RenamedPath]:
        return [
            RenamedPath(item.source, item.destination)
            for item in self.items
            if item.success
            and not item.skipped
            and item.source
            and item.destination
            and item.source != item.destination
        ]

    @property
    def reported_errors(self) -> list[str]:
        """Return at most ``max_reported_errors`` messages plus an overflow note."""

        return truncate_errors(self.errors, self.max_reported_errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "successCount": self.success_count,
            "failedCount": self.failed_count,
            "skippedCount": self.skipped_count,
            "errors": self.reported_errors,
            "renamed": [pair.to_dict() for pair in self.renamed],
        }


@dataclass(slots=True, frozen=True)
class RenamePreview:
    """Planned rename of one media file, as shown to callers before execution."""

    id: int | None
    current_name: str
    new_name: str
    new_full_path: str
    artist: str | None
    album: str | None
    title: str | None
    track_number: str | None
    quality: str | None
    format: str | None
    need_rename: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "current_name": self.current_name,
            "new_name": self.new_name,
            "new_full_path": self.new_full_path,
            "artist": self.artist,
            "album": self.album,
            "title": self.title,
            "track_number": self.track_number,
            "quality": self.quality,
            "format": self.format,
            "needRename": self.need_rename,
        }


@dataclass(slots=True, frozen=True)
class TaskResult:
    """Result handed back to the deferred-task runner."""

    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)


def truncate_errors(errors: list[str], limit: int = DEFAULT_MAX_REPORTED_ERRORS) -> list[str]:
    """Keep the first ``limit`` errors and summarize the remainder."""

    if len(errors) <= limit:
        return list(errors)
    return [*errors[:limit], f"and {len(errors) - limit} more..."]


__all__ = [
    "BatchRenameResult",
    "DEFAULT_MAX_REPORTED_ERRORS",
    "RenameAnalysis",
    "RenameEvent",
    "RenameItemResult",
    "RenamePreview",
    "RenameReason",
    "RenamedPath",
    "TaskResult",
    "truncate_errors",
]
