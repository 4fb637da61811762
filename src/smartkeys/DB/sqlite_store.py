# smartkeys/DB/sqlite_store.py
from __future__ import annotations
import os
import sqlite3
import threading
from typing import List, Optional

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL
);
"""


class SQLiteStore:
    """Single-table key-value store; one commit per write."""
    def __init__(self, db_path: str) -> None:
        self.path = db_path
        if db_path != ":memory:":
            os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self.conn: sqlite3.Connection = sqlite3.connect(db_path, check_same_thread=False)
        self._lock = threading.Lock()
        self.conn.executescript(_SCHEMA)

    # ---- Read ----
    def get(self, key: str) -> Optional[str]:
        with self._lock:
            row = self.conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        return row[0] if row else None

    def keys(self) -> List[str]:
        with self._lock:
            rows = self.conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
        return [r[0] for r in rows]

    # ---- Write ----
    def set(self, key: str, value: str) -> None:
        with self._lock:
            self.conn.execute("INSERT OR REPLACE INTO kv(key, value) VALUES (?,?)", (key, str(value)))
            self.conn.commit()

    # ---- Delete ----
    def remove(self, key: str) -> None:
        with self._lock:
            self.conn.execute("DELETE FROM kv WHERE key=?", (key,))
            self.conn.commit()

    # ---- lifecycle ----
    def close(self) -> None:
        with self._lock:
            self.conn.close()
