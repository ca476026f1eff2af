"""src/filenaming/platform/db/daos/naming_pattern_dao.py
What: Manage user-defined naming patterns.
Why: Rename requests reference patterns by id or fall back to the active default.
"""

from __future__ import annotations

import sqlite3
from typing import Final

from filenaming.platform.logging import logger
from filenaming.shared.library import NamingPattern


class NamingPatternDAO:
    """Data access object for the naming_patterns table."""

    _SELECT: Final[str] = "SELECT id, name, pattern, is_active, is_default FROM naming_patterns"

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def insert_pattern(
        self,
        pattern: str,
        name: str | None = None,
        *,
        is_active: bool = True,
        is_default: bool = False,
    ) -> int | None:
        try:
            cursor = self.conn.execute(
                """
                INSERT INTO naming_patterns (name, pattern, is_active, is_default)
                VALUES (?, ?, ?, ?)
                """,
                (name, pattern, int(is_active), int(is_default)),
            )
            self.conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as exc:
            logger.error("Failed to add naming pattern %s: %s", name or pattern, exc)
            self.conn.rollback()
            return None

    def get_by_id(self, pattern_id: int) -> NamingPattern | None:
        row = self.conn.execute(f"{self._SELECT} WHERE id = ?", (pattern_id,)).fetchone()
        return self._to_pattern(row) if row else None

    def fetch_active(self) -> list[NamingPattern]:
        """Return active patterns, default first, then by id."""

        cursor = self.conn.execute(f"{self._SELECT} WHERE is_active = 1 ORDER BY is_default DESC, id ASC")
        return [self._to_pattern(row) for row in cursor.fetchall()]

    @staticmethod
    def _to_pattern(row: tuple[int, str | None, str, int, int]) -> NamingPattern:
        pattern_id, name, pattern, is_active, is_default = row
        return NamingPattern(
            pattern=pattern,
            name=name,
            is_active=bool(is_active),
            is_default=bool(is_default),
            id=pattern_id,
        )


__all__ = ["NamingPatternDAO"]
