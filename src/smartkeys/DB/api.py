# smartkeys/DB/api.py
from __future__ import annotations
import logging
from typing import Optional, Protocol

log = logging.getLogger(__name__)


class StoreWriteError(RuntimeError):
    """An explicit save could not be persisted."""


class KeyValueStore(Protocol):
    # Read
    def get(self, key: str) -> Optional[str]: ...
    # Write
    def set(self, key: str, value: str) -> None: ...
    # Delete
    def remove(self, key: str) -> None: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> KeyValueStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (file and table are created when missing)
      - memory://      -> MemoryStore
    """
    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        path = dsn.removeprefix("sqlite:///")
        log.info("Opening SQLite key-value store at %s", path)
        return SQLiteStore(path)

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
