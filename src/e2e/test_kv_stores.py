from pathlib import Path

import pytest
from smartkeys.DB.api import make_store
from smartkeys.DB.memory_store import MemoryStore
from smartkeys.DB.sqlite_store import SQLiteStore


def _exercise(store):
    assert store.get("missing") is None
    store.set("a", "1")
    store.set("a", "2")
    assert store.get("a") == "2"
    store.remove("a")
    store.remove("a")
    assert store.get("a") is None


def test_memory_store_crud():
    store = make_store("memory://")
    assert isinstance(store, MemoryStore)
    _exercise(store)
    store.close()


def test_sqlite_store_crud_and_reopen(tmp_path: Path):
    dsn = f"sqlite:///{tmp_path / 'nested' / 'kv.sqlite'}"
    store = make_store(dsn)
    assert isinstance(store, SQLiteStore)
    _exercise(store)
    store.set("templateHistory", '{"functions": []}')
    store.close()

    reopened = make_store(dsn)
    try:
        assert reopened.get("templateHistory") == '{"functions": []}'
        assert reopened.keys() == ["templateHistory"]
    finally:
        reopened.close()


def test_unsupported_dsn():
    with pytest.raises(ValueError):
        make_store("redis://localhost")
