"""
Summary: Maintain persisted needs-rename flags for single files, tracks and the whole library.
Why: Bulk recomputation pages through files so memory stays bounded.
"""

from __future__ import annotations

from logging import Logger, getLogger

from filenaming.shared.library import MediaFile, NamingPattern

from ..domain.models import RenameEvent
from .decision import RenameDecisionEngine
from .ports import MediaFileRepository, NamingPatternRepository

DEFAULT_STATUS_BATCH_SIZE = 100


class RenameStatusService:
    """Recompute needs-rename flags with the active naming pattern."""

    _files: MediaFileRepository
    _patterns: NamingPatternRepository
    _engine: RenameDecisionEngine
    _batch_size: int
    _logger: Logger

    def __init__(
        self,
        *,
        files: MediaFileRepository,
        patterns: NamingPatternRepository,
        engine: RenameDecisionEngine,
        batch_size: int = DEFAULT_STATUS_BATCH_SIZE,
        logger: Logger | None = None,
    ) -> None:
        self._files = files
        self._patterns = patterns
        self._engine = engine
        self._batch_size = batch_size if batch_size > 0 else DEFAULT_STATUS_BATCH_SIZE
        self._logger = logger or getLogger(__name__)

    def update_file_status(self, media_file: MediaFile) -> bool:
        """Refresh and persist the flag of one file; False when it cannot be evaluated."""

        pattern = self._active_pattern()
        if pattern is None:
            return False
        if not self._refresh(media_file, pattern):
            return False
        self._files.commit()
        return True

    def update_track_status(self, track_id: int) -> int:
        """Refresh every file of a track and return how many were updated."""

        track = self._files.get_track(track_id)
        if track is None:
            self._logger.warning("Track %s not found; no statuses updated", track_id)
            return 0
        pattern = self._active_pattern()
        if pattern is None:
            return 0

        updated = sum(1 for media_file in track.files if self._refresh(media_file, pattern))
        self._files.commit()
        return updated

    def update_all_statuses(self) -> int:
        """Refresh every media file page by page and return the update count."""

        pattern = self._active_pattern()
        if pattern is None:
            return 0

        updated = 0
        for page_number, page in enumerate(self._files.iter_media_file_pages(self._batch_size), start=1):
            updated += sum(1 for media_file in page if self._refresh(media_file, pattern))
            self._files.commit()
            self._files.clear()
            self._logger.debug("Status page %d processed (%d files)", page_number, len(page))

        self._logger.info(
            "Updated rename status for %d files",
            updated,
            extra={"rename_event": RenameEvent.STATUS_UPDATE},
        )
        return updated

    def count_needing_rename(self) -> int:
        return self._files.count_by_rename_flag(True)

    def count_not_needing_rename(self) -> int:
        return self._files.count_by_rename_flag(False)

    def _active_pattern(self) -> NamingPattern | None:
        pattern = self._patterns.get_active_pattern()
        if pattern is None:
            self._logger.warning("No active naming pattern; rename status left unchanged")
        return pattern

    def _refresh(self, media_file: MediaFile, pattern: NamingPattern) -> bool:
        track = media_file.track
        if track is None:
            self._logger.warning("MediaFile %s has no track; rename status left unchanged", media_file.id)
            return False
        _ = self._engine.refresh(track, pattern.pattern, media_file)
        self._files.save(media_file)
        return True


__all__ = ["DEFAULT_STATUS_BATCH_SIZE", "RenameStatusService"]
