"""Adapter: SQLite-backed KeyValueStore for persisted slot indices."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path


class SqliteKeyValueStore:
    """Stores string values by key in a single table.

    Each call opens its own connection; last write wins.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_parent_dir()
        self._init_schema()

    def _ensure_parent_dir(self) -> None:
        path = Path(self._db_path)
        if path.parent.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS slot_state (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )

    def get(self, key: str) -> str | None:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM slot_state WHERE key = ?", (key,)).fetchone()
        return None if row is None else row["value"]

    def set(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO slot_state (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, datetime.now(timezone.utc).isoformat()),
            )

    def remove(self, key: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM slot_state WHERE key = ?", (key,))

    def items(self, prefix: str = "") -> list[tuple[str, str]]:
        """All (key, value) pairs whose key starts with ``prefix``, sorted by key."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT key, value FROM slot_state WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
        return [(row["key"], row["value"]) for row in rows]
