"""src/filenaming/platform/db/daos/media_file_dao.py
What: Query and update rows of the media_files table.
Why: Rename status and executor results persist path, flag and sidecar columns.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from filenaming.platform.logging import logger


@dataclass(slots=True, frozen=True)
class MediaFileRecord:
    """Row projection of ``media_files``."""

    id: int
    track_id: int | None
    path: str | None
    format: str | None
    quality: str | None
    size: int | None
    duration: float | None
    sidecar_path: str | None
    needs_rename: bool


class MediaFileDAO:
    """Data access object for the media_files table."""

    _COLUMNS: Final[str] = (
        "id, track_id, path, format, quality, size, duration, sidecar_path, needs_rename"
    )

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def insert_media_file(
        self,
        *,
        track_id: int | None,
        path: str | None,
        format: str | None = None,
        quality: str | None = None,
        size: int | None = None,
        duration: float | None = None,
        sidecar_path: str | None = None,
        needs_rename: bool = True,
    ) -> int | None:
        try:
            cursor = self.conn.execute(
                """
                INSERT INTO media_files (
                    track_id, path, format, quality, size, duration, sidecar_path, needs_rename
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (track_id, path, format, quality, size, duration, sidecar_path, int(needs_rename)),
            )
            self.conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as exc:  # pragma: no cover - defensive logging
            logger.error("Failed to insert media file %s: %s", path, exc)
            self.conn.rollback()
            return None

    def fetch_by_ids(self, media_file_ids: Iterable[int]) -> list[MediaFileRecord]:
        ids = sorted(set(media_file_ids))
        if not ids:
            return []
        placeholders = ",".join("?" for _ in ids)
        return self._fetch(f"WHERE id IN ({placeholders}) ORDER BY id", ids)

    def fetch_by_track_ids(self, track_ids: Iterable[int]) -> list[MediaFileRecord]:
        ids = sorted(set(track_ids))
        if not ids:
            return []
        placeholders = ",".join("?" for _ in ids)
        return self._fetch(f"WHERE track_id IN ({placeholders}) ORDER BY id", ids)

    def fetch_needing_rename(self) -> list[MediaFileRecord]:
        return self._fetch("WHERE needs_rename = 1 ORDER BY id", ())

    def fetch_page(self, *, after_id: int, limit: int) -> list[MediaFileRecord]:
        """Return up to ``limit`` rows with ``id`` greater than ``after_id``."""

        return self._fetch("WHERE id > ? ORDER BY id LIMIT ?", (after_id, limit))

    def count_by_flag(self, needs_rename: bool) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) FROM media_files WHERE needs_rename = ?",
            (int(needs_rename),),
        ).fetchone()
        return int(row[0]) if row else 0

    def update_state(
        self,
        media_file_id: int,
        *,
        path: str | None,
        needs_rename: bool,
        sidecar_path: str | None,
    ) -> None:
        """Stage a state update; the caller commits."""

        _ = self.conn.execute(
            """
            UPDATE media_files
            SET path = ?, needs_rename = ?, sidecar_path = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (path, int(needs_rename), sidecar_path, media_file_id),
        )

    def _fetch(self, clause: str, params: Iterable[object]) -> list[MediaFileRecord]:
        cursor = self.conn.execute(f"SELECT {self._COLUMNS} FROM media_files {clause}", tuple(params))
        return [
            MediaFileRecord(
                id=row[0],
                track_id=row[1],
                path=row[2],
                format=row[3],
                quality=row[4],
                size=row[5],
                duration=row[6],
                sidecar_path=row[7],
                needs_rename=bool(row[8]),
            )
            for row in cursor.fetchall()
        ]


__all__ = ["MediaFileDAO", "MediaFileRecord"]
