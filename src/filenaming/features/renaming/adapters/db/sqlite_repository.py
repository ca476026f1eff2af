"""SQLite-backed adapters for the renaming feature."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator

from filenaming.platform.db.daos.catalog_dao import CatalogDAO
from filenaming.platform.db.daos.media_file_dao import MediaFileDAO, MediaFileRecord
from filenaming.platform.db.daos.naming_pattern_dao import NamingPatternDAO
from filenaming.platform.db.daos.storage_root_dao import StorageRootDAO
from filenaming.platform.db.db_manager import DatabaseManager
from filenaming.shared.library import MediaFile, NamingPattern, StorageRoot, Track

from ...domain.errors import CommitFailed
from ...usecases.ports import MediaFileRepository, NamingPatternRepository, StorageRootRepository


class SqliteLibraryRepository(MediaFileRepository, StorageRootRepository, NamingPatternRepository):
    """Bridge renaming use cases to the SQLite library store.

    Loaded tracks and files are kept in an identity map so a file's track
    always carries every sibling file; ``clear`` drops the map between pages.
    """

    _db_manager: DatabaseManager
    _catalog: CatalogDAO
    _media_files: MediaFileDAO
    _roots: StorageRootDAO
    _patterns: NamingPatternDAO
    _loaded_files: dict[int, MediaFile]
    _loaded_tracks: dict[int, Track]

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager
        if self._db_manager.conn is None:
            self._db_manager.connect()
        if self._db_manager.conn is None:  # pragma: no cover - defensive guard
            raise RuntimeError("Database connection could not be established")

        conn = self._db_manager.conn
        self._catalog = CatalogDAO(conn)
        self._media_files = MediaFileDAO(conn)
        self._roots = StorageRootDAO(conn)
        self._patterns = NamingPatternDAO(conn)
        self._loaded_files = {}
        self._loaded_tracks = {}

    # Media files ---------------------------------------------------------------

    def get_media_files(self, media_file_ids: Iterable[int]) -> list[MediaFile]:
        return self._materialize(self._media_files.fetch_by_ids(media_file_ids))

    def get_media_file(self, media_file_id: int) -> MediaFile | None:
        files = self.get_media_files([media_file_id])
        return files[0] if files else None

    def get_track(self, track_id: int) -> Track | None:
        self._load_tracks({track_id})
        return self._loaded_tracks.get(track_id)

    def get_files_needing_rename(self) -> list[MediaFile]:
        return self._materialize(self._media_files.fetch_needing_rename())

    def iter_media_file_pages(self, page_size: int) -> Iterator[list[MediaFile]]:
        after_id = 0
        while True:
            records = self._media_files.fetch_page(after_id=after_id, limit=page_size)
            if not records:
                return
            after_id = records[-1].id
            yield self._materialize(records)

    def count_by_rename_flag(self, needs_rename: bool) -> int:
        return self._media_files.count_by_flag(needs_rename)

    def save(self, media_file: MediaFile) -> None:
        if media_file.id is None:
            raise ValueError("Cannot save a media file without an id")
        self._media_files.update_state(
            media_file.id,
            path=media_file.path,
            needs_rename=media_file.needs_rename,
            sidecar_path=media_file.sidecar_path,
        )

    def commit(self) -> None:
        """Commit pending saves; a failed commit is rolled back and raised as ``CommitFailed``."""
        try:
            self._db_manager.commit_transaction()
        except sqlite3.Error as e:
            self._db_manager.rollback_transaction()
            raise CommitFailed(str(e)) from e

    def clear(self) -> None:
        self._loaded_files.clear()
        self._loaded_tracks.clear()

    # Storage roots and patterns ------------------------------------------------

    def get_storage_roots(self) -> list[StorageRoot]:
        return self._roots.fetch_all()

    def get_pattern(self, pattern_id: int) -> NamingPattern | None:
        return self._patterns.get_by_id(pattern_id)

    def get_active_pattern(self) -> NamingPattern | None:
        active = self._patterns.fetch_active()
        return active[0] if active else None

    # Graph assembly -------------------------------------------------------------

    def _materialize(self, records: list[MediaFileRecord]) -> list[MediaFile]:
        self._load_tracks({record.track_id for record in records if record.track_id is not None})
        return [self._attach(record) for record in records]

    def _load_tracks(self, track_ids: set[int]) -> None:
        missing = track_ids - self._loaded_tracks.keys()
        if not missing:
            return
        self._loaded_tracks.update(self._catalog.load_tracks(missing))
        for record in self._media_files.fetch_by_track_ids(missing):
            _ = self._attach(record)

    def _attach(self, record: MediaFileRecord) -> MediaFile:
        existing = self._loaded_files.get(record.id)
        if existing is not None:
            return existing

        media_file = MediaFile(
            path=record.path,
            format=record.format,
            quality=record.quality,
            size=record.size,
            duration=record.duration,
            sidecar_path=record.sidecar_path,
            needs_rename=record.needs_rename,
            id=record.id,
        )
        track = self._loaded_tracks.get(record.track_id) if record.track_id is not None else None
        if track is not None:
            _ = track.add_file(media_file)
        self._loaded_files[record.id] = media_file
        return media_file


__all__ = ["SqliteLibraryRepository"]
