# smartkeys/customization.py
"""
User-customised keyboard tabs.

A language's tabs can be edited (buttons added, changed or removed, tabs
added or removed) and saved as one JSON blob per language. Loading never
fails: missing or malformed data falls back to the built-in tabs.

Saved layout:

    [{"key": "basic", "label": "Basic",
      "data": [{"id": "py_1", "label": "=", "text": "= "}, ...]}, ...]
"""

from __future__ import annotations
import json
import logging
import threading
import uuid
from typing import Dict, List, Sequence, Tuple

from . import config as CFG
from .DB.api import KeyValueStore, StoreWriteError
from .models import KeyboardTab, LanguageDefinition, SnippetItem

log = logging.getLogger(__name__)

Tabs = Tuple[KeyboardTab, ...]


def tabs_to_json(tabs: Sequence[KeyboardTab]) -> str:
    return json.dumps([
        {
            "key": tab.key,
            "label": tab.label,
            "data": [{"id": b.id, "label": b.label, "text": b.text} for b in tab.data],
        }
        for tab in tabs
    ])


def tabs_from_json(raw: str) -> Tabs:
    """Parse a saved blob; raises ValueError for anything not shaped like tabs."""
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("expected a list of tabs")
    tabs: List[KeyboardTab] = []
    for entry in payload:
        if not isinstance(entry, dict) or not isinstance(entry.get("data"), list):
            raise ValueError("tab entry must be an object with a 'data' list")
        buttons = []
        for b in entry["data"]:
            if not isinstance(b, dict) or not all(isinstance(b.get(f), str) for f in ("id", "label", "text")):
                raise ValueError("button entry must have string id/label/text")
            buttons.append(SnippetItem(id=b["id"], label=b["label"], text=b["text"]))
        tabs.append(KeyboardTab(key=str(entry.get("key", "")), label=str(entry.get("label", "")), data=tuple(buttons)))
    return tuple(tabs)


class CustomizationStore:
    """Persists edited tabs under "<CUSTOM_TABS_KEY>:<language key>"."""

    def __init__(self, store: KeyValueStore, *, prefix: str = CFG.CUSTOM_TABS_KEY) -> None:
        self._store = store
        self._prefix = prefix
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def key_for(self, language: LanguageDefinition) -> str:
        return f"{self._prefix}:{language.key}"

    def _lock(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    def is_customized(self, language: LanguageDefinition) -> bool:
        return self._store.get(self.key_for(language)) is not None

    def load(self, language: LanguageDefinition) -> Tabs:
        key = self.key_for(language)
        raw = self._store.get(key)
        if raw is None:
            return language.snippets
        try:
            return tabs_from_json(raw)
        except ValueError as e:
            log.warning("Discarding malformed keyboard customisation %s (%s); using defaults", key, e)
            return language.snippets

    def save(self, language: LanguageDefinition, tabs: Sequence[KeyboardTab]) -> None:
        key = self.key_for(language)
        blob = tabs_to_json(tabs)
        with self._lock(key):
            try:
                self._store.set(key, blob)
            except Exception as e:
                log.warning("Failed to save keyboard customisation %s: %s", key, e)
                raise StoreWriteError(f"could not save keyboard settings for {language.key}") from e
        log.info("Saved keyboard customisation for %s (%d tabs)", language.key, len(tabs))

    def reset(self, language: LanguageDefinition) -> None:
        key = self.key_for(language)
        with self._lock(key):
            try:
                self._store.remove(key)
            except Exception as e:
                raise StoreWriteError(f"could not reset keyboard settings for {language.key}") from e


# /* ~~~ editing helpers: each returns a new tuple of tabs ~~~ */

def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _replace_tab(tabs: Sequence[KeyboardTab], index: int, data: Sequence[SnippetItem]) -> Tabs:
    tab = tabs[index]
    out = list(tabs)
    out[index] = KeyboardTab(key=tab.key, label=tab.label, data=tuple(data))
    return tuple(out)


def _check_button(label: str, text: str) -> str:
    label = label.strip()
    if not label or text == "":
        raise ValueError("Please enter both label and text")
    return label


def add_button(tabs: Sequence[KeyboardTab], tab_index: int, label: str, text: str) -> Tabs:
    label = _check_button(label, text)
    data = list(tabs[tab_index].data) + [SnippetItem(id=_new_id(), label=label, text=text)]
    return _replace_tab(tabs, tab_index, data)


def edit_button(tabs: Sequence[KeyboardTab], tab_index: int, button_index: int, label: str, text: str) -> Tabs:
    label = _check_button(label, text)
    data = list(tabs[tab_index].data)
    data[button_index] = SnippetItem(id=data[button_index].id, label=label, text=text)
    return _replace_tab(tabs, tab_index, data)


def delete_button(tabs: Sequence[KeyboardTab], tab_index: int, button_index: int) -> Tabs:
    data = list(tabs[tab_index].data)
    del data[button_index]
    return _replace_tab(tabs, tab_index, data)


def add_tab(tabs: Sequence[KeyboardTab], label: str) -> Tabs:
    label = label.strip()
    if not label:
        raise ValueError("Please enter a tab name")
    return tuple(tabs) + (KeyboardTab(key=_new_id(), label=label, data=()),)


def delete_tab(tabs: Sequence[KeyboardTab], tab_index: int) -> Tabs:
    if len(tabs) <= 1:
        raise ValueError("Cannot delete the last tab")
    out = list(tabs)
    del out[tab_index]
    return tuple(out)
