"""
Summary: Classify whether a media file sits at its canonical path.
Why: The needs-rename flag must mirror an exact comparison with the rendered path.
"""

from __future__ import annotations

from collections.abc import Iterable
from logging import Logger, getLogger

from filenaming.features.naming import FileNaming, join_root
from filenaming.shared.library import MediaFile, StorageRoot, Track

from ..domain.models import RenameAnalysis, RenameReason
from .roots import StorageRootIndex, relative_to_root


class RenameDecisionEngine:
    """Resolve storage roots and compare current against canonical paths.

    Comparison is exact string equality: any metadata change that alters the
    rendered path marks the file as needing a rename.
    """

    _naming: FileNaming
    _roots: StorageRootIndex
    _logger: Logger

    def __init__(
        self,
        *,
        naming: FileNaming,
        roots: StorageRootIndex | Iterable[StorageRoot],
        logger: Logger | None = None,
    ) -> None:
        self._naming = naming
        self._roots = roots if isinstance(roots, StorageRootIndex) else StorageRootIndex(roots)
        self._logger = logger or getLogger(__name__)

    @property
    def naming(self) -> FileNaming:
        return self._naming

    def resolve_root(self, media_file: MediaFile) -> StorageRoot | None:
        """Return the storage root with the longest prefix of the file's path."""

        return self._roots.resolve(media_file.path)

    def expected_path(self, track: Track, pattern: str, media_file: MediaFile) -> str | None:
        """Return the canonical full path, or None when no root owns the file."""

        root = self.resolve_root(media_file)
        if root is None:
            return None
        return self._naming.canonical_path(root.normalized_path, track, pattern, media_file)

    def classify(self, track: Track, pattern: str, media_file: MediaFile) -> RenameAnalysis:
        """Classify ``media_file`` against the canonical path ``pattern`` renders.

        Args:
            track: Track owning the file.
            pattern: Naming pattern text.
            media_file: File to classify.

        Returns:
            RenameAnalysis: Reason, flag and the compared paths.
        """
        current_path = media_file.path
        if not current_path:
            return RenameAnalysis(
                needs_rename=True,
                reason=RenameReason.NO_FILE_PATH,
                current_path=current_path,
            )

        root = self.resolve_root(media_file)
        if root is None:
            self._logger.debug("No storage root owns %s", current_path)
            return RenameAnalysis(
                needs_rename=True,
                reason=RenameReason.LIBRARY_NOT_FOUND,
                current_path=current_path,
            )

        root_path = root.normalized_path
        expected_relative = self._naming.render_path(track, pattern, media_file)
        expected_path = join_root(root_path, expected_relative)
        current_relative = relative_to_root(current_path, root_path)

        filename_correct = current_relative == expected_relative
        path_correct = current_path == expected_path

        if filename_correct and path_correct:
            reason = RenameReason.FILE_IS_CORRECT
        elif filename_correct:
            reason = RenameReason.PATH_CHANGE_NEEDED
        else:
            reason = RenameReason.FILENAME_CHANGE_NEEDED

        return RenameAnalysis(
            needs_rename=reason is not RenameReason.FILE_IS_CORRECT,
            reason=reason,
            current_path=current_path,
            expected_path=expected_path,
            filename_correct=filename_correct,
            path_correct=path_correct,
            root_path=root_path,
        )

    def refresh(self, track: Track, pattern: str, media_file: MediaFile) -> RenameAnalysis:
        """Classify ``media_file`` and store the outcome in its needs-rename flag."""

        analysis = self.classify(track, pattern, media_file)
        media_file.needs_rename = analysis.needs_rename
        return analysis


__all__ = ["RenameDecisionEngine"]
