"""src/filenaming/platform/db/daos/catalog_dao.py
What: Read and write artists, albums, mediums and tracks.
Why: Rebuild the Track -> Album -> Artist / Medium graph naming needs from rows.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from datetime import date

from filenaming.platform.logging import logger
from filenaming.shared.library import Album, Artist, Medium, Track


class CatalogDAO:
    """Data access object for the catalog tables."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def insert_artist(self, name: str | None, folder_name: str | None = None) -> int | None:
        return self._insert(
            "INSERT INTO artists (name, folder_name) VALUES (?, ?)",
            (name, folder_name),
        )

    def insert_album(
        self,
        artist_id: int | None,
        title: str | None,
        release_date: date | None = None,
    ) -> int | None:
        return self._insert(
            "INSERT INTO albums (artist_id, title, release_date) VALUES (?, ?, ?)",
            (artist_id, title, release_date.isoformat() if release_date else None),
        )

    def insert_medium(
        self,
        album_id: int,
        position: int = 1,
        format: str | None = None,
        title: str | None = None,
    ) -> int | None:
        return self._insert(
            "INSERT INTO mediums (album_id, position, format, title) VALUES (?, ?, ?, ?)",
            (album_id, position, format, title),
        )

    def insert_track(
        self,
        album_id: int | None,
        title: str | None,
        track_number: str | None = None,
        medium_id: int | None = None,
    ) -> int | None:
        return self._insert(
            "INSERT INTO tracks (album_id, medium_id, title, track_number) VALUES (?, ?, ?, ?)",
            (album_id, medium_id, title, track_number),
        )

    def update_artist_name(self, artist_id: int, name: str | None) -> bool:
        try:
            _ = self.conn.execute("UPDATE artists SET name = ? WHERE id = ?", (name, artist_id))
            self.conn.commit()
            return True
        except sqlite3.Error as exc:  # pragma: no cover - defensive logging
            logger.error("Failed to update artist %s: %s", artist_id, exc)
            self.conn.rollback()
            return False

    def load_tracks(self, track_ids: Iterable[int]) -> dict[int, Track]:
        """Load tracks with album, artist and mediums attached (files excluded)."""

        ids = sorted(set(track_ids))
        if not ids:
            return {}

        placeholders = ",".join("?" for _ in ids)
        cursor = self.conn.execute(
            f"""
            SELECT id, album_id, medium_id, title, track_number
            FROM tracks
            WHERE id IN ({placeholders})
            """,
            ids,
        )
        rows = cursor.fetchall()

        albums = self._load_albums({row[1] for row in rows if row[1] is not None})
        mediums_by_id = {
            medium.id: medium for album in albums.values() for medium in album.mediums
        }

        tracks: dict[int, Track] = {}
        for track_id, album_id, medium_id, title, track_number in rows:
            tracks[track_id] = Track(
                title=title,
                track_number=track_number,
                album=albums.get(album_id) if album_id is not None else None,
                medium=mediums_by_id.get(medium_id) if medium_id is not None else None,
                id=track_id,
            )
        return tracks

    def _load_albums(self, album_ids: set[int]) -> dict[int, Album]:
        if not album_ids:
            return {}

        ids = sorted(album_ids)
        placeholders = ",".join("?" for _ in ids)
        album_rows = self.conn.execute(
            f"""
            SELECT al.id, al.title, al.release_date, ar.id, ar.name, ar.folder_name
            FROM albums al
            LEFT JOIN artists ar ON ar.id = al.artist_id
            WHERE al.id IN ({placeholders})
            """,
            ids,
        ).fetchall()

        albums: dict[int, Album] = {}
        for album_id, title, release_raw, artist_id, artist_name, folder_name in album_rows:
            artist = (
                Artist(name=artist_name, folder_name=folder_name, id=artist_id)
                if artist_id is not None
                else None
            )
            albums[album_id] = Album(
                title=title,
                release_date=_parse_date(release_raw),
                artist=artist,
                id=album_id,
            )

        medium_rows = self.conn.execute(
            f"""
            SELECT id, album_id, position, format, title
            FROM mediums
            WHERE album_id IN ({placeholders})
            ORDER BY album_id, position, id
            """,
            ids,
        ).fetchall()
        for medium_id, album_id, position, medium_format, medium_title in medium_rows:
            albums[album_id].mediums.append(
                Medium(position=position, format=medium_format, title=medium_title, id=medium_id)
            )
        return albums

    def _insert(self, sql: str, params: tuple[object, ...]) -> int | None:
        try:
            cursor = self.conn.execute(sql, params)
            self.conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as exc:  # pragma: no cover - defensive logging
            logger.error("Failed to insert catalog row: %s", exc)
            self.conn.rollback()
            return None


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        logger.warning("Ignoring malformed release date: %s", raw)
        return None


__all__ = ["CatalogDAO"]
