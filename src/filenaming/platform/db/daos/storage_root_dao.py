"""src/filenaming/platform/db/daos/storage_root_dao.py
What: Manage configured storage roots.
Why: Root resolution needs every root path known to the library.
"""

from __future__ import annotations

import sqlite3

from filenaming.platform.logging import logger
from filenaming.shared.library import StorageRoot


class StorageRootDAO:
    """Data access object for the storage_roots table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def insert_root(self, path: str, name: str | None = None) -> int | None:
        try:
            cursor = self.conn.execute(
                "INSERT INTO storage_roots (path, name) VALUES (?, ?)",
                (path, name),
            )
            self.conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as exc:
            logger.error("Failed to add storage root %s: %s", path, exc)
            self.conn.rollback()
            return None

    def fetch_all(self) -> list[StorageRoot]:
        cursor = self.conn.execute("SELECT id, path, name FROM storage_roots ORDER BY id")
        return [StorageRoot(path=path, name=name, id=root_id) for root_id, path, name in cursor.fetchall()]


__all__ = ["StorageRootDAO"]
