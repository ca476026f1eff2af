"""Database manager for the filenaming library store."""

import sqlite3
from pathlib import Path
from typing import Any, Final, final

from filenaming.config.paths import default_db_path
from filenaming.platform.filesystem import ensure_parent_directory
from filenaming.platform.logging import logger

_EXPECTED_TABLES: Final[frozenset[str]] = frozenset(
    {
        "artists",
        "albums",
        "mediums",
        "tracks",
        "media_files",
        "storage_roots",
        "naming_patterns",
    }
)

_SCHEMA: Final[tuple[str, ...]] = (
    """
    CREATE TABLE IF NOT EXISTS artists (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        folder_name TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS albums (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        artist_id INTEGER,
        title TEXT,
        release_date TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (artist_id) REFERENCES artists (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS mediums (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        album_id INTEGER NOT NULL,
        position INTEGER NOT NULL DEFAULT 1,
        format TEXT,
        title TEXT,
        FOREIGN KEY (album_id) REFERENCES albums (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tracks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        album_id INTEGER,
        medium_id INTEGER,
        title TEXT,
        track_number TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (album_id) REFERENCES albums (id),
        FOREIGN KEY (medium_id) REFERENCES mediums (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS media_files (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        track_id INTEGER,
        path TEXT,
        format TEXT,
        quality TEXT,
        size INTEGER,
        duration REAL,
        sidecar_path TEXT,
        needs_rename INTEGER NOT NULL DEFAULT 1,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (track_id) REFERENCES tracks (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS storage_roots (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        path TEXT NOT NULL UNIQUE,
        name TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS naming_patterns (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        pattern TEXT NOT NULL,
        is_active INTEGER NOT NULL DEFAULT 1,
        is_default INTEGER NOT NULL DEFAULT 0,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_media_files_track ON media_files(track_id)",
    "CREATE INDEX IF NOT EXISTS idx_media_files_needs_rename ON media_files(needs_rename)",
    "CREATE INDEX IF NOT EXISTS idx_tracks_album ON tracks(album_id)",
    "CREATE INDEX IF NOT EXISTS idx_mediums_album ON mediums(album_id)",
)


@final
class DatabaseManager:
    """Database manager for the library store."""

    db_path: str | Path
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None) -> None:
        """Initialize database manager.

        Args:
            db_path: Path to database file. If None, use the default path in the
                data directory. If ":memory:", use an in-memory database.
        """
        if db_path == ":memory:":
            self.db_path = ":memory:"
        elif db_path is None:
            self.db_path = default_db_path()
        else:
            self.db_path = Path(db_path) if isinstance(db_path, str) else db_path
        self.conn = None

    def connect(self) -> None:
        """Connect to database and initialize schema."""
        try:
            if isinstance(self.db_path, Path):
                _ = ensure_parent_directory(self.db_path)

            try:
                self.conn = sqlite3.connect(
                    self.db_path,
                    timeout=30.0,
                    isolation_level="IMMEDIATE",
                    check_same_thread=False,
                )
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e):
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e
                raise

            _ = self.conn.execute("PRAGMA foreign_keys = ON")
            _ = self.conn.execute("PRAGMA synchronous = NORMAL")
            _ = self.conn.execute("PRAGMA journal_mode = WAL")
            _ = self.conn.execute("PRAGMA busy_timeout = 30000")

            self._init_schema()

        except sqlite3.Error as e:
            logger.error("Failed to connect to database: %s", e)
            raise

    def _init_schema(self) -> None:
        """Create missing tables and indexes."""
        if self.conn is None:
            return

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
            existing_tables = {row[0] for row in cursor.fetchall()}
            if existing_tables.issuperset(_EXPECTED_TABLES):
                logger.debug("Tables already exist, skipping schema initialization")
                return

            for statement in _SCHEMA:
                _ = cursor.execute(statement)
            self.conn.commit()
            logger.debug("Initialized database schema")

        except sqlite3.Error as e:
            logger.error("Failed to initialize schema: %s", e)
            self.conn.rollback()
            raise

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            try:
                self.conn.close()
                self.conn = None
            except sqlite3.Error as e:
                logger.error("Failed to close database connection: %s", e)

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        self.close()

    def commit_transaction(self) -> None:
        """Commit the current transaction."""
        if self.conn:
            self.conn.commit()

    def rollback_transaction(self) -> None:
        """Rollback the current transaction."""
        if self.conn:
            self.conn.rollback()
