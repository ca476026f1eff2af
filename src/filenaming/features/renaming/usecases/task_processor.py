"""
Summary: Deferred-task entry point running a rename batch from task metadata.
Why: Task runners expect a result object, never an exception, from processors.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from logging import Logger, getLogger
from typing import Any, ClassVar

from ..domain.errors import NoFilesSelected, PatternNotFound, RenameError
from ..domain.models import BatchRenameResult, TaskResult
from .executor import RenameExecutor
from .ports import MediaFileRepository, NamingPatternRepository


class RenameFilesTaskProcessor:
    """Process ``rename_files`` tasks queued by the request layer."""

    TASK_TYPE: ClassVar[str] = "rename_files"

    _patterns: NamingPatternRepository
    _files: MediaFileRepository
    _executor: RenameExecutor
    _logger: Logger

    def __init__(
        self,
        *,
        patterns: NamingPatternRepository,
        files: MediaFileRepository,
        executor: RenameExecutor,
        logger: Logger | None = None,
    ) -> None:
        self._patterns = patterns
        self._files = files
        self._executor = executor
        self._logger = logger or getLogger(__name__)

    def supports(self, task_type: str) -> bool:
        return task_type == self.TASK_TYPE

    def process(self, metadata: Mapping[str, Any] | None) -> TaskResult:
        """Run the batch described by ``metadata``.

        Reads ``pattern_id`` and ``media_file_ids`` (``track_file_ids`` is
        accepted from older task payloads).
        """
        metadata = metadata or {}
        pattern_id = metadata.get("pattern_id")
        raw_ids = metadata.get("media_file_ids") or metadata.get("track_file_ids") or []
        if isinstance(raw_ids, (str, bytes)) or not isinstance(raw_ids, Sequence):
            return TaskResult(success=False, message="Media file IDs must be a list")
        media_file_ids = list(raw_ids)

        if not pattern_id or not media_file_ids:
            return TaskResult(success=False, message="Missing pattern ID or media file IDs")

        self._logger.info(
            "Processing rename files task (pattern %s, %d files)",
            pattern_id,
            len(media_file_ids),
        )

        try:
            pattern = self._patterns.get_pattern(int(pattern_id))
            if pattern is None:
                raise PatternNotFound(int(pattern_id))
            media_files = self._files.get_media_files(int(file_id) for file_id in media_file_ids)
            if not media_files:
                raise NoFilesSelected("No media files found for the requested IDs")
        except (RenameError, ValueError) as exc:
            self._logger.error("Failed to process rename files task: %s", exc)
            return TaskResult(success=False, message=str(exc))

        result = self._executor.rename_batch(pattern, media_files)
        return TaskResult(
            success=True,
            message=format_summary(result),
            data={
                "patternId": pattern.id,
                "totalFiles": len(media_file_ids),
                "successCount": result.success_count,
                "failedCount": result.failed_count,
                "errorsCount": len(result.errors),
                "errors": result.errors,
                "renamedFiles": [pair.to_dict() for pair in result.renamed],
            },
        )


def format_summary(result: BatchRenameResult) -> str:
    """Render the one-line completion message for a batch."""

    message = f"File renaming completed: {result.success_count} successful, {result.failed_count} failed"
    if result.renamed:
        details = ", ".join(f"{pair.source} → {pair.destination}" for pair in result.renamed)
        message += f" | Files: {details}"

    errors = result.errors
    limit = result.max_reported_errors
    if errors:
        message += f" (Errors: {'; '.join(errors[:limit])})"
        if len(errors) > limit:
            message += f" and {len(errors) - limit} more..."
    return message


__all__ = ["RenameFilesTaskProcessor", "format_summary"]
