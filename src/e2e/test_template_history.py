import json
import logging
import threading

from smartkeys.DB.memory_store import MemoryStore
from smartkeys.languages import PYTHON
from smartkeys.models import TemplateMatchType as T
from smartkeys.templates import DEFAULT_HISTORY, TemplateHistoryStore


class FailingStore(MemoryStore):
    def set(self, key, value):
        raise OSError("disk full")


def test_history_is_capped_most_recent_first():
    hist = TemplateHistoryStore(MemoryStore())
    for i in range(25):
        assert hist.record_confirmed(T.VARIABLE, f"v{i}") is True
    values = hist.values(T.VARIABLE)
    assert len(values) == 20
    assert values == [f"v{i}" for i in range(24, 4, -1)]


def test_blank_values_are_ignored():
    hist = TemplateHistoryStore(MemoryStore())
    before = hist.snapshot()
    assert hist.record_confirmed(T.FUNCTION, "") is False
    assert hist.record_confirmed(T.FUNCTION, "   \t") is False
    assert hist.snapshot() == before


def test_duplicate_keeps_its_position():
    hist = TemplateHistoryStore(MemoryStore())
    assert hist.record_confirmed(T.FUNCTION, "process") is False
    assert hist.values(T.FUNCTION) == list(DEFAULT_HISTORY["functions"])


def test_history_persists_and_reloads():
    store = MemoryStore()
    hist = TemplateHistoryStore(store)
    hist.record_confirmed(T.CLASS, "Graph")

    saved = json.loads(store.get("templateHistory"))
    assert saved["classes"][0] == "Graph"

    again = TemplateHistoryStore(store)
    again.load()
    assert again.values(T.CLASS)[0] == "Graph"
    assert again.values(T.MODULE) == list(DEFAULT_HISTORY["modules"])


def test_malformed_history_falls_back_to_defaults(caplog):
    hist = TemplateHistoryStore(MemoryStore({"templateHistory": "{not json"}))
    with caplog.at_level(logging.WARNING):
        hist.load()
    assert "malformed template history" in caplog.text
    assert hist.snapshot() == {k: list(v) for k, v in DEFAULT_HISTORY.items()}


def test_wrongly_shaped_buckets_are_ignored():
    blob = json.dumps({"variables": "oops", "functions": ["main"], "unknown": ["x"]})
    hist = TemplateHistoryStore(MemoryStore({"templateHistory": blob}))
    hist.load()
    assert hist.values(T.FUNCTION) == ["main"]
    assert hist.values(T.VARIABLE) == list(DEFAULT_HISTORY["variables"])
    assert "unknown" not in hist.snapshot()


def test_failed_write_keeps_in_memory_history(caplog):
    hist = TemplateHistoryStore(FailingStore())
    with caplog.at_level(logging.WARNING):
        assert hist.record_confirmed(T.MODULE, "numpy") is True
    assert hist.values(T.MODULE)[0] == "numpy"
    assert "Failed to persist" in caplog.text


def test_suggestions_put_language_values_first():
    hist = TemplateHistoryStore(MemoryStore())
    hist.record_confirmed(T.VARIABLE, "total")
    canonical = list(PYTHON.placeholder_values[T.VARIABLE])
    out = hist.suggestions_for(T.VARIABLE, PYTHON)
    assert out[:len(canonical)] == canonical
    assert out[len(canonical):] == ["total", "temp"]


def test_concurrent_appends_do_not_lose_updates():
    hist = TemplateHistoryStore(MemoryStore())

    def worker(n):
        for j in range(2):
            hist.record_confirmed(T.CONDITION, f"c{n}_{j}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    values = hist.values(T.CONDITION)
    assert len(values) == 20
    assert set(values) == {f"c{n}_{j}" for n in range(10) for j in range(2)}


def test_confirmed_value_is_stored_as_typed():
    hist = TemplateHistoryStore(MemoryStore())
    assert hist.record_confirmed(T.CONDITION, " n > 0 ") is True
    assert hist.values(T.CONDITION)[0] == " n > 0 "
