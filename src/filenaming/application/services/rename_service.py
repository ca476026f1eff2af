"""Application service wiring persistence and filesystem adapters into the rename use cases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import Any, final

from filenaming.config.settings import DB_PATH, MAX_REPORTED_ERRORS, NAMING_DEFAULTS, STATUS_BATCH_SIZE
from filenaming.features.naming import FileNaming, NamingDefaults
from filenaming.features.renaming import (
    BatchRenameResult,
    NoFilesSelected,
    PatternNotFound,
    RenameAnalysis,
    RenameDecisionEngine,
    RenameError,
    RenameExecutor,
    RenameFilesTaskProcessor,
    RenamePreview,
    RenameStatusService,
    TaskResult,
    build_previews,
)
from filenaming.features.renaming.adapters.db.sqlite_repository import SqliteLibraryRepository
from filenaming.features.renaming.adapters.filesystem.local import LocalFileSystemGateway
from filenaming.features.renaming.usecases.ports import (
    FileSystemGateway,
    MediaFileRepository,
    NamingPatternRepository,
    StorageRootRepository,
)
from filenaming.platform.db.db_manager import DatabaseManager
from filenaming.shared.library import MediaFile, NamingPattern


@dataclass(slots=True, frozen=True)
class RenameStatusCounts:
    """Number of files flagged and not flagged for renaming."""

    needing_rename: int
    not_needing_rename: int

    @property
    def total(self) -> int:
        return self.needing_rename + self.not_needing_rename


@final
class RenameFilesService:
    """Application façade for previewing, classifying and renaming media files."""

    _files: MediaFileRepository
    _roots: StorageRootRepository
    _patterns: NamingPatternRepository
    _filesystem: FileSystemGateway
    _naming: FileNaming
    _status_batch_size: int
    _max_reported_errors: int
    _logger: Logger

    def __init__(
        self,
        *,
        db_path: Path | str | None = None,
        files: MediaFileRepository | None = None,
        roots: StorageRootRepository | None = None,
        patterns: NamingPatternRepository | None = None,
        filesystem: FileSystemGateway | None = None,
        defaults: NamingDefaults | None = None,
        status_batch_size: int | None = None,
        max_reported_errors: int | None = None,
        logger: Logger | None = None,
    ) -> None:
        provided = [port is not None for port in (files, roots, patterns)]
        if any(provided) and not all(provided):
            raise ValueError("files, roots and patterns must be provided together")

        if files is None:
            repository = SqliteLibraryRepository(DatabaseManager(db_path or DB_PATH))
            self._files = repository
            self._roots = repository
            self._patterns = repository
        else:
            assert roots is not None and patterns is not None
            self._files = files
            self._roots = roots
            self._patterns = patterns

        self._filesystem = filesystem or LocalFileSystemGateway()
        self._naming = FileNaming(defaults or NAMING_DEFAULTS)
        self._status_batch_size = status_batch_size or STATUS_BATCH_SIZE
        self._max_reported_errors = max_reported_errors or MAX_REPORTED_ERRORS
        self._logger = logger or getLogger(__name__)

    # Requests -------------------------------------------------------------------

    def resolve_pattern(self, pattern_id: int | None = None) -> NamingPattern:
        """Return the requested pattern, or the active default when no id is given."""

        pattern = (
            self._patterns.get_active_pattern()
            if pattern_id is None
            else self._patterns.get_pattern(pattern_id)
        )
        if pattern is None:
            raise PatternNotFound(pattern_id)
        return pattern

    def select_files(self, media_file_ids: Sequence[int] | None = None) -> list[MediaFile]:
        """Return the requested files, or every flagged file when no ids are given."""

        if media_file_ids is None:
            media_files = self._files.get_files_needing_rename()
        else:
            media_files = self._files.get_media_files(media_file_ids)
        if not media_files:
            raise NoFilesSelected()
        return media_files

    def preview(
        self,
        pattern_id: int | None = None,
        media_file_ids: Sequence[int] | None = None,
    ) -> list[RenamePreview]:
        pattern = self.resolve_pattern(pattern_id)
        return build_previews(self.decision_engine(), pattern, self.select_files(media_file_ids))

    def rename(
        self,
        pattern_id: int | None = None,
        media_file_ids: Sequence[int] | None = None,
    ) -> BatchRenameResult:
        """Rename the selected files; partial failures are reported, not raised."""

        pattern = self.resolve_pattern(pattern_id)
        media_files = self.select_files(media_file_ids)
        return self.executor().rename_batch(pattern, media_files)

    def rename_track(
        self,
        track_id: int,
        root_path: str,
        pattern_id: int | None = None,
    ) -> BatchRenameResult:
        """Rename every file of one track under a caller-supplied root."""

        pattern = self.resolve_pattern(pattern_id)
        track = self._files.get_track(track_id)
        if track is None or not track.files:
            raise NoFilesSelected(f"No media files found for track {track_id}")
        return self.executor().rename_batch(pattern, track.files, root_override=root_path)

    def analyze(self, media_file_id: int, pattern_id: int | None = None) -> RenameAnalysis:
        """Classify one file against the canonical path of ``pattern_id``."""

        pattern = self.resolve_pattern(pattern_id)
        media_file = self._files.get_media_file(media_file_id)
        if media_file is None:
            raise NoFilesSelected(f"Media file {media_file_id} not found")
        if media_file.track is None:
            raise RenameError(f"Media file {media_file_id} is not attached to a track")
        return self.decision_engine().classify(media_file.track, pattern.pattern, media_file)

    def refresh_status(self, track_id: int | None = None) -> int:
        """Recompute needs-rename flags for one track or the whole library."""

        service = self.status_service()
        if track_id is not None:
            return service.update_track_status(track_id)
        return service.update_all_statuses()

    def counts(self) -> RenameStatusCounts:
        service = self.status_service()
        return RenameStatusCounts(
            needing_rename=service.count_needing_rename(),
            not_needing_rename=service.count_not_needing_rename(),
        )

    def process_task(self, metadata: Mapping[str, Any] | None) -> TaskResult:
        """Run a queued ``rename_files`` task."""

        return self.task_processor().process(metadata)

    # Wiring ---------------------------------------------------------------------

    def decision_engine(self) -> RenameDecisionEngine:
        # Roots are reloaded on every call.
        return RenameDecisionEngine(
            naming=self._naming,
            roots=self._roots.get_storage_roots(),
            logger=self._logger,
        )

    def executor(self) -> RenameExecutor:
        return RenameExecutor(
            engine=self.decision_engine(),
            filesystem=self._filesystem,
            files=self._files,
            max_reported_errors=self._max_reported_errors,
            logger=self._logger,
        )

    def status_service(self) -> RenameStatusService:
        return RenameStatusService(
            files=self._files,
            patterns=self._patterns,
            engine=self.decision_engine(),
            batch_size=self._status_batch_size,
            logger=self._logger,
        )

    def task_processor(self) -> RenameFilesTaskProcessor:
        return RenameFilesTaskProcessor(
            patterns=self._patterns,
            files=self._files,
            executor=self.executor(),
            logger=self._logger,
        )


__all__ = ["RenameFilesService", "RenameStatusCounts"]
