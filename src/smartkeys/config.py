# smartkeys/config.py
from __future__ import annotations
import os

TOP_K: int = 6
INDENT_WIDTH: int = 4

# Affinity lists are ranked: score = 1.0 - SEQUENCE_STEP * index
SEQUENCE_STEP: float = 0.1

# Template fill history
HISTORY_LIMIT: int = 20
HISTORY_KEY: str = "templateHistory"

# User-customised keyboard tabs, one blob per language: "<prefix>:<language key>"
CUSTOM_TABS_KEY: str = "customKeyboardTabs"

DEFAULT_LANGUAGE: str = "python"

# /* ~~~ storage DSN: "memory://" or "sqlite:///path/to/smartkeys.sqlite" ~~~ */
DB_DSN: str = os.environ.get("SMARTKEYS_DB", "memory://")

VERBOSE: bool = os.environ.get("SMARTKEYS_VERBOSE") == "1"
