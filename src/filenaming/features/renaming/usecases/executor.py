"""
Summary: Move media files and their sidecars to canonical paths in sequential batches.
Why: A failing item must be recorded without aborting the rest of the batch.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path

from filenaming.features.naming import join_root
from filenaming.shared.library import MediaFile, NamingPattern

from ..domain.errors import (
    DirectoryCreateFailed,
    NoFilePath,
    RenameError,
    RenameFailed,
    RenameItemError,
    SidecarMoveFailed,
    SourceFileMissing,
    StorageRootNotFound,
)
from ..domain.models import (
    DEFAULT_MAX_REPORTED_ERRORS,
    BatchRenameResult,
    RenameEvent,
    RenameItemResult,
)
from .decision import RenameDecisionEngine
from .ports import FileSystemGateway, MediaFileRepository


@dataclass(slots=True)
class _RenamePlan:
    """Everything resolved for one file before anything is moved."""

    media_file: MediaFile
    root_path: str
    source: Path
    destination: Path
    sidecar_source: Path | None = None
    sidecar_destination: Path | None = None

    @property
    def in_place(self) -> bool:
        return self.source == self.destination


def build_final_path(root_path: str | None, relative_path: str) -> str:
    """Join a caller-supplied root override with a rendered relative path."""

    if root_path is None or not root_path.strip():
        raise StorageRootNotFound(root_path)
    return join_root(root_path.strip(), relative_path)


class RenameExecutor:
    """Rename media files to the paths a naming pattern renders.

    Per file: plan (paths, source check, collision check, directories), move the
    sidecar, then move the primary file. A failed primary move puts the sidecar
    back, so an item never ends half renamed on disk.
    """

    _engine: RenameDecisionEngine
    _filesystem: FileSystemGateway
    _files: MediaFileRepository
    _max_reported_errors: int
    _logger: Logger

    def __init__(
        self,
        *,
        engine: RenameDecisionEngine,
        filesystem: FileSystemGateway,
        files: MediaFileRepository,
        max_reported_errors: int = DEFAULT_MAX_REPORTED_ERRORS,
        logger: Logger | None = None,
    ) -> None:
        self._engine = engine
        self._filesystem = filesystem
        self._files = files
        self._max_reported_errors = max_reported_errors
        self._logger = logger or getLogger(__name__)

    def rename_batch(
        self,
        pattern: NamingPattern | str,
        media_files: Sequence[MediaFile],
        root_override: str | None = None,
    ) -> BatchRenameResult:
        """Rename ``media_files`` sequentially and aggregate the outcome.

        Args:
            pattern: Naming pattern (or its text) to render.
            media_files: Files with their track graph attached.
            root_override: Root to render under instead of the resolved storage
                root, used for direct single-track renames.

        Returns:
            BatchRenameResult: Per-item results; partial failure never raises.
        """
        pattern_text = pattern.pattern if isinstance(pattern, NamingPattern) else pattern
        result = BatchRenameResult(max_reported_errors=self._max_reported_errors)

        for media_file in media_files:
            if not media_file.needs_rename:
                self._logger.debug(
                    "MediaFile %s already at its canonical path; skipping",
                    media_file.id,
                    extra={"rename_event": RenameEvent.FILE_SKIP, "media_file_id": media_file.id},
                )
                result.items.append(
                    RenameItemResult(
                        media_file_id=media_file.id,
                        success=True,
                        skipped=True,
                        source=media_file.path,
                    )
                )
                continue

            try:
                item = self._rename_single(pattern_text, media_file, root_override)
            except RenameItemError as exc:
                item = self._failed_item(media_file, str(exc))
            except Exception as exc:  # pragma: no cover - defensive logging
                item = self._failed_item(media_file, str(exc) or type(exc).__name__)
            result.items.append(item)

        try:
            self._files.commit()
        except RenameError as exc:
            result.commit_error = str(exc)
            self._logger.error(
                "Rename batch moved files but could not save them: %s",
                exc,
                extra={"rename_event": RenameEvent.BATCH_COMMIT_ERROR},
            )
        self._logger.info(
            "Rename batch complete: %d successful, %d failed, %d skipped",
            result.success_count,
            result.failed_count,
            result.skipped_count,
            extra={"rename_event": RenameEvent.BATCH_COMPLETE},
        )
        return result

    def _rename_single(
        self,
        pattern: str,
        media_file: MediaFile,
        root_override: str | None,
    ) -> RenameItemResult:
        plan = self._plan(pattern, media_file, root_override)

        if plan.in_place:
            media_file.needs_rename = False
            self._files.save(media_file)
            self._logger.info(
                "Already at target: %s",
                plan.destination,
                extra={
                    "rename_event": RenameEvent.FILE_ALREADY_AT_TARGET,
                    "media_file_id": media_file.id,
                    "target_path": str(plan.destination),
                    "root_path": plan.root_path,
                },
            )
            return RenameItemResult(
                media_file_id=media_file.id,
                success=True,
                source=str(plan.source),
                destination=str(plan.destination),
            )

        sidecar_moved = self._move_sidecar(plan)
        try:
            self._filesystem.move(plan.source, plan.destination)
        except OSError as exc:
            if sidecar_moved:
                self._restore_sidecar(plan)
            raise RenameFailed(str(plan.source), str(plan.destination), str(exc)) from exc

        media_file.path = str(plan.destination)
        media_file.needs_rename = False
        if sidecar_moved and plan.sidecar_destination is not None:
            media_file.sidecar_path = str(plan.sidecar_destination)
        self._files.save(media_file)

        self._logger.info(
            "Renamed %s → %s",
            plan.source,
            plan.destination,
            extra={
                "rename_event": RenameEvent.FILE_MOVE,
                "media_file_id": media_file.id,
                "source_path": str(plan.source),
                "target_path": str(plan.destination),
                "root_path": plan.root_path,
            },
        )
        return RenameItemResult(
            media_file_id=media_file.id,
            success=True,
            source=str(plan.source),
            destination=str(plan.destination),
            sidecar_destination=media_file.sidecar_path if sidecar_moved else None,
        )

    def _plan(self, pattern: str, media_file: MediaFile, root_override: str | None) -> _RenamePlan:
        if not media_file.path:
            raise NoFilePath()
        track = media_file.track
        if track is None:
            raise RenameItemError("Media file is not attached to a track")

        naming = self._engine.naming
        if root_override is not None:
            destination = build_final_path(root_override, naming.render_path(track, pattern, media_file))
            root_path = root_override.strip().rstrip("/") or "/"
        else:
            root = self._engine.resolve_root(media_file)
            if root is None:
                raise StorageRootNotFound(media_file.path)
            root_path = root.normalized_path
            destination = naming.canonical_path(root_path, track, pattern, media_file)

        plan = _RenamePlan(
            media_file=media_file,
            root_path=root_path,
            source=Path(media_file.path),
            destination=Path(destination),
        )

        if not self._filesystem.exists(plan.source):
            raise SourceFileMissing(media_file.path)
        if plan.in_place:
            return plan
        if self._filesystem.exists(plan.destination) and not self._filesystem.same_file(
            plan.source, plan.destination
        ):
            raise RenameFailed(str(plan.source), str(plan.destination), "destination already exists")

        self._plan_sidecar(plan, naming.sanitizer.sanitize_filename)
        self._ensure_parent(plan.destination)
        return plan

    def _plan_sidecar(self, plan: _RenamePlan, sanitize_filename: Callable[[str], str]) -> None:
        sidecar_path = plan.media_file.sidecar_path
        if not sidecar_path:
            return
        sidecar_source = Path(sidecar_path)
        if not self._filesystem.exists(sidecar_source):
            self._logger.debug("Sidecar %s not found; leaving it untouched", sidecar_source)
            return

        sidecar_name = sanitize_filename(f"{plan.destination.stem}{sidecar_source.suffix}")
        sidecar_destination = plan.destination.parent / sidecar_name
        if sidecar_destination == sidecar_source:
            return
        if self._filesystem.exists(sidecar_destination) and not self._filesystem.same_file(
            sidecar_source, sidecar_destination
        ):
            raise SidecarMoveFailed(str(sidecar_source), str(sidecar_destination), "destination already exists")

        plan.sidecar_source = sidecar_source
        plan.sidecar_destination = sidecar_destination

    def _ensure_parent(self, path: Path) -> None:
        try:
            _ = self._filesystem.ensure_parent(path)
        except OSError as exc:
            raise DirectoryCreateFailed(str(path.parent), str(exc)) from exc

    def _move_sidecar(self, plan: _RenamePlan) -> bool:
        if plan.sidecar_source is None or plan.sidecar_destination is None:
            return False
        try:
            self._filesystem.move(plan.sidecar_source, plan.sidecar_destination)
        except OSError as exc:
            raise SidecarMoveFailed(str(plan.sidecar_source), str(plan.sidecar_destination), str(exc)) from exc
        self._logger.info(
            "Sidecar moved %s → %s",
            plan.sidecar_source,
            plan.sidecar_destination,
            extra={
                "rename_event": RenameEvent.SIDECAR_MOVE,
                "media_file_id": plan.media_file.id,
                "source_path": str(plan.sidecar_source),
                "target_path": str(plan.sidecar_destination),
                "root_path": plan.root_path,
            },
        )
        return True

    def _restore_sidecar(self, plan: _RenamePlan) -> None:
        assert plan.sidecar_source is not None and plan.sidecar_destination is not None
        try:
            self._filesystem.move(plan.sidecar_destination, plan.sidecar_source)
        except OSError as exc:
            self._logger.error(
                "Failed to move sidecar back to %s: %s",
                plan.sidecar_source,
                exc,
                extra={"rename_event": RenameEvent.SIDECAR_ERROR, "media_file_id": plan.media_file.id},
            )
            return
        self._logger.warning(
            "Sidecar moved back to %s after failed rename",
            plan.sidecar_source,
            extra={"rename_event": RenameEvent.SIDECAR_ROLLBACK, "media_file_id": plan.media_file.id},
        )

    def _failed_item(self, media_file: MediaFile, message: str) -> RenameItemResult:
        error = f"MediaFile {media_file.id}: {message}"
        self._logger.error(
            "%s",
            error,
            extra={
                "rename_event": RenameEvent.FILE_ERROR,
                "media_file_id": media_file.id,
                "source_path": media_file.path,
            },
        )
        return RenameItemResult(
            media_file_id=media_file.id,
            success=False,
            source=media_file.path,
            error=error,
        )


__all__ = ["RenameExecutor", "build_final_path"]
