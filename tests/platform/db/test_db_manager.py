"""Test database functionality."""

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest

from filenaming.platform.db.db_manager import DatabaseManager


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create a database manager with in-memory database.

    Yields:
        DatabaseManager: Database manager instance.
    """
    manager = DatabaseManager(":memory:")
    manager.connect()
    yield manager
    manager.close()


def _insert_root(conn: sqlite3.Connection, path: str) -> None:
    _ = conn.execute("INSERT INTO storage_roots (path, name) VALUES (?, ?)", (path, None))


def test_schema_creates_library_tables(db_manager: DatabaseManager) -> None:
    """Every library table exists after connecting."""
    conn = db_manager.conn
    assert conn is not None
    tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {
        "artists",
        "albums",
        "mediums",
        "tracks",
        "media_files",
        "storage_roots",
        "naming_patterns",
    } <= tables


def test_database_transaction(db_manager: DatabaseManager) -> None:
    """Test database transaction management."""
    conn = db_manager.conn
    assert conn is not None
    _insert_root(conn, "/music")

    db_manager.commit_transaction()

    row = conn.execute("SELECT path FROM storage_roots").fetchone()
    assert row is not None
    assert row[0] == "/music"


def test_database_rollback(db_manager: DatabaseManager) -> None:
    """Test database rollback functionality."""
    conn = db_manager.conn
    assert conn is not None
    _insert_root(conn, "/music")

    db_manager.rollback_transaction()

    assert conn.execute("SELECT path FROM storage_roots").fetchone() is None


def test_storage_root_paths_are_unique(db_manager: DatabaseManager) -> None:
    conn = db_manager.conn
    assert conn is not None
    _insert_root(conn, "/music")

    with pytest.raises(sqlite3.IntegrityError):
        _insert_root(conn, "/music")


def test_file_database_is_reused(tmp_path: Path) -> None:
    """Reconnecting to a file database keeps existing rows."""
    db_path = tmp_path / "nested" / "library.db"

    with DatabaseManager(db_path) as manager:
        assert manager.conn is not None
        _insert_root(manager.conn, "/music")
        manager.commit_transaction()

    assert db_path.exists()
    with DatabaseManager(str(db_path)) as manager:
        assert manager.conn is not None
        assert manager.conn.execute("SELECT COUNT(*) FROM storage_roots").fetchone()[0] == 1
    assert manager.conn is None
