# Path: `src/filenaming/features/renaming/__init__.py`
# Summary: Export renaming feature domain values, errors and use cases.
# Why: Provide a stable import surface for the application layer and tests.

from .domain.errors import (
    CommitFailed,
    DirectoryCreateFailed,
    DuplicateStorageRootError,
    NoFilePath,
    NoFilesSelected,
    PatternNotFound,
    RenameError,
    RenameFailed,
    RenameItemError,
    SidecarMoveFailed,
    SourceFileMissing,
    StorageRootNotFound,
)
from .domain.models import (
    BatchRenameResult,
    RenameAnalysis,
    RenameEvent,
    RenameItemResult,
    RenamePreview,
    RenameReason,
    RenamedPath,
    TaskResult,
)
from .usecases.decision import RenameDecisionEngine
from .usecases.executor import RenameExecutor, build_final_path
from .usecases.ports import (
    FileSystemGateway,
    MediaFileRepository,
    NamingPatternRepository,
    StorageRootRepository,
)
from .usecases.preview import build_previews
from .usecases.roots import StorageRootIndex
from .usecases.status import RenameStatusService
from .usecases.task_processor import RenameFilesTaskProcessor, format_summary

__all__ = [
    "BatchRenameResult",
    "CommitFailed",
    "DirectoryCreateFailed",
    "DuplicateStorageRootError",
    "FileSystemGateway",
    "MediaFileRepository",
    "NamingPatternRepository",
    "NoFilePath",
    "NoFilesSelected",
    "PatternNotFound",
    "RenameAnalysis",
    "RenameDecisionEngine",
    "RenameError",
    "RenameEvent",
    "RenameExecutor",
    "RenameFailed",
    "RenameFilesTaskProcessor",
    "RenameItemError",
    "RenameItemResult",
    "RenamePreview",
    "RenameReason",
    "RenameStatusService",
    "RenamedPath",
    "SidecarMoveFailed",
    "SourceFileMissing",
    "StorageRootIndex",
    "StorageRootNotFound",
    "StorageRootRepository",
    "TaskResult",
    "build_final_path",
    "build_previews",
    "format_summary",
]
