import logging

import pytest
from smartkeys.customization import (
    CustomizationStore,
    add_button,
    add_tab,
    delete_button,
    delete_tab,
    edit_button,
)
from smartkeys.DB.api import StoreWriteError
from smartkeys.DB.memory_store import MemoryStore
from smartkeys.languages import GO, PYTHON


class FailingStore(MemoryStore):
    def set(self, key, value):
        raise OSError("read-only")


def test_defaults_when_nothing_saved():
    cs = CustomizationStore(MemoryStore())
    assert cs.load(PYTHON) == PYTHON.snippets
    assert cs.is_customized(PYTHON) is False


def test_save_and_load_round_trip_per_language():
    store = MemoryStore()
    cs = CustomizationStore(store)
    tabs = add_button(PYTHON.snippets, 0, " pp ", "pprint(")
    cs.save(PYTHON, tabs)

    assert store.get("customKeyboardTabs:python") is not None
    loaded = cs.load(PYTHON)
    assert loaded[0].data[-1].label == "pp"
    assert loaded[0].data[-1].text == "pprint("
    # other languages are untouched
    assert cs.load(GO) == GO.snippets


def test_corrupt_blob_falls_back_to_defaults(caplog):
    cs = CustomizationStore(MemoryStore({"customKeyboardTabs:python": "[1, 2"}))
    with caplog.at_level(logging.WARNING):
        assert cs.load(PYTHON) == PYTHON.snippets
    assert "malformed keyboard customisation" in caplog.text


@pytest.mark.parametrize("blob", ['{"a": 1}', "[1, 2]", '[{"key": "k", "data": [{"id": 1}]}]'])
def test_wrong_shape_falls_back_to_defaults(blob):
    cs = CustomizationStore(MemoryStore({"customKeyboardTabs:python": blob}))
    assert cs.load(PYTHON) == PYTHON.snippets


def test_save_failure_is_reported():
    cs = CustomizationStore(FailingStore())
    with pytest.raises(StoreWriteError):
        cs.save(PYTHON, PYTHON.snippets)
    # loading still works from defaults
    assert cs.load(PYTHON) == PYTHON.snippets


def test_reset_restores_defaults():
    cs = CustomizationStore(MemoryStore())
    cs.save(PYTHON, add_tab(PYTHON.snippets, "Mine"))
    assert cs.load(PYTHON)[-1].label == "Mine"
    cs.reset(PYTHON)
    assert cs.load(PYTHON) == PYTHON.snippets


def test_editing_helpers_validate_input():
    tabs = PYTHON.snippets
    with pytest.raises(ValueError):
        add_button(tabs, 0, "  ", "x")
    with pytest.raises(ValueError):
        add_button(tabs, 0, "x", "")
    with pytest.raises(ValueError):
        add_tab(tabs, " ")
    with pytest.raises(ValueError):
        delete_tab(tabs[:1], 0)


def test_edit_and_delete_button():
    tabs = edit_button(PYTHON.snippets, 0, 0, "eq", " = ")
    first = tabs[0].data[0]
    assert (first.id, first.label, first.text) == ("py_1", "eq", " = ")
    tabs = delete_button(tabs, 0, 0)
    assert tabs[0].data[0].id == "py_2"
    assert len(delete_tab(tabs, 0)) == len(PYTHON.snippets) - 1
