# smartkeys/templates.py
"""
Template placeholders inside inserted snippets.

Snippet texts contain marker words ("function", "ClassName", "var",
"condition", "module", "type") that the user fills in afterwards. This
module finds them, splices replacements in, and keeps a per-type history
of confirmed fill values that is persisted as one JSON blob.
"""

from __future__ import annotations
import json
import logging
import re
import threading
from typing import Dict, List, Mapping, Optional

from . import config as CFG
from .DB.api import KeyValueStore
from .models import LanguageDefinition, TemplateMatch, TemplateMatchType as T


log = logging.getLogger(__name__)

MARKERS: Mapping[str, T] = {
    "function": T.FUNCTION,
    "ClassName": T.CLASS,
    "var": T.VARIABLE,
    "condition": T.CONDITION,
    "module": T.MODULE,
    "type": T.TYPE,
}

# whole-word, case-sensitive; the marker words never overlap by spelling
_MARKER_RE = re.compile(r"\b(%s)\b" % "|".join(MARKERS))

# history bucket name per placeholder type, as persisted
BUCKETS: Mapping[T, str] = {
    T.FUNCTION: "functions",
    T.CLASS: "classes",
    T.VARIABLE: "variables",
    T.CONDITION: "conditions",
    T.MODULE: "modules",
    T.TYPE: "types",
}

DEFAULT_HISTORY: Mapping[str, tuple] = {
    "functions": ("calculate", "process", "handle", "get", "set", "update"),
    "classes": ("User", "Data", "Handler", "Manager", "Controller"),
    "variables": ("result", "data", "value", "item", "index", "temp"),
    "conditions": ("x > 0", "i < len(arr)", "data is not None", "result == True"),
    "modules": ("os", "sys", "math", "random", "json", "datetime"),
    "types": ("int", "str", "float", "bool", "list", "dict"),
}


# /* ~~~ detection and substitution (pure) ~~~ */

def find_all(text: str) -> List[TemplateMatch]:
    """Every placeholder occurrence, sorted by start offset."""
    return [
        TemplateMatch(placeholder=m.group(1), start=m.start(), end=m.end(), type=MARKERS[m.group(1)])
        for m in _MARKER_RE.finditer(text)
    ]


def find_at(text: str, position: int) -> Optional[TemplateMatch]:
    """First placeholder whose [start, end] span contains `position` (both ends inclusive)."""
    for match in find_all(text):
        if match.start <= position <= match.end:
            return match
    return None


def substitute(text: str, match: TemplateMatch, replacement: str) -> str:
    """Literal splice of `replacement` over text[match.start:match.end]."""
    return text[:match.start] + replacement + text[match.end:]


def parse_match_type(value: str) -> T:
    """'variable', 'VARIABLE' or a marker word such as 'ClassName' -> TemplateMatchType."""
    if value in MARKERS:
        return MARKERS[value]
    try:
        return T(value.lower())
    except ValueError:
        raise ValueError(f"unknown placeholder type: {value!r}") from None


# /* ~~~ history ~~~ */

class TemplateHistoryStore:
    """
    Recently confirmed fill values per placeholder type.

    The in-memory copy is authoritative for the session; persistence is
    best-effort and a failed write only logs a warning. Appends to the same
    bucket are serialized by a per-bucket lock.
    """

    def __init__(self, store: KeyValueStore, *, key: str = CFG.HISTORY_KEY, limit: int = CFG.HISTORY_LIMIT) -> None:
        self._store = store
        self._key = key
        self._limit = limit
        self._history: Dict[str, List[str]] = {name: list(seed) for name, seed in DEFAULT_HISTORY.items()}
        self._locks: Dict[str, threading.Lock] = {name: threading.Lock() for name in DEFAULT_HISTORY}
        self._write_lock = threading.Lock()

    def load(self) -> None:
        """Merge the persisted blob over the built-in seeds, bucket by bucket."""
        raw = self._store.get(self._key)
        if raw is None:
            return
        try:
            saved = json.loads(raw)
        except ValueError as e:
            log.warning("Discarding malformed template history (%s); using defaults", e)
            return
        if not isinstance(saved, dict):
            log.warning("Discarding template history of type %s; using defaults", type(saved).__name__)
            return
        for name, values in saved.items():
            if name not in self._history:
                continue
            if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                log.warning("Ignoring malformed history bucket %r", name)
                continue
            self._history[name] = values[: self._limit]

    def values(self, match_type: T) -> List[str]:
        return list(self._history[BUCKETS[match_type]])

    def snapshot(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._history.items()}

    def suggestions_for(self, match_type: T, language: LanguageDefinition) -> List[str]:
        """Language canonical values first, then history values not already listed."""
        out = list(language.placeholder_values.get(match_type, ()))
        seen = set(out)
        for value in self._history[BUCKETS[match_type]]:
            if value not in seen:
                seen.add(value)
                out.append(value)
        return out

    def record_confirmed(self, match_type: T, value: str) -> bool:
        """
        Put a confirmed value at the front of its bucket and persist.

        The value is stored as given. Returns False when nothing changed: an
        empty/whitespace value, or a value already present (it keeps its
        position).
        """
        if not value.strip():
            return False
        bucket = BUCKETS[match_type]
        with self._locks[bucket]:
            entries = self._history[bucket]
            if value in entries:
                return False
            entries.insert(0, value)
            del entries[self._limit:]
        self._persist()
        return True

    def _persist(self) -> None:
        with self._write_lock:
            blob = json.dumps(self.snapshot())
            try:
                self._store.set(self._key, blob)
            except Exception as e:
                log.warning("Failed to persist template history: %s", e)
