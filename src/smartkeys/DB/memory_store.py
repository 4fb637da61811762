# smartkeys/DB/memory_store.py
from __future__ import annotations
import threading
from typing import Dict, Optional


class MemoryStore:
    """Dict-backed store (useful for tests or ephemeral runs)."""
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._rows: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        return self._rows.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._rows[key] = str(value)

    def remove(self, key: str) -> None:
        with self._lock:
            self._rows.pop(key, None)

    def keys(self):
        return sorted(self._rows)

    def close(self) -> None:
        self._rows.clear()
