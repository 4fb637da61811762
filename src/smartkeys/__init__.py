"""
SmartKeys: contextual input prediction for a code keyboard.

Given the text around the cursor and the active programming language, the
engine ranks a fixed catalog of keyboard buttons by how likely each one is
to be the next thing typed, and classifies source lines into tokens for
highlighting.

The package is split the same way the data flows:
- Language catalog (buttons, affinity tables, syntax tables)
- Typing context extraction and line tokenizing
- Scoring cascade (affinity -> idiom -> new-line starters) and expansion
- Template placeholders with a persisted fill history
- Key-value persistence for history and keyboard customisations

Example Usage:
    from smartkeys import Engine

    eng = Engine()
    python = eng.language("python")
    for p in eng.predict("for ", language=python):
        print(f"{p.score:.2f} {p.button.label}")
    eng.shutdown()
"""

from .catalog import LanguageCatalog, build_candidate_pool
from .context import extract_context
from .engine import Engine
from .expansion import expand
from .models import (
    KeyboardButton,
    KeyboardTab,
    LanguageDefinition,
    Prediction,
    PredictionReason,
    SnippetItem,
    TemplateMatch,
    TemplateMatchType,
    Token,
    TokenType,
    TypingContext,
)
from .scoring import rank
from .tokenizer import classify, classify_text

__version__ = "0.1.0"

__all__ = [
    "Engine",
    "LanguageCatalog",
    "build_candidate_pool",
    "extract_context",
    "classify",
    "classify_text",
    "rank",
    "expand",
    "KeyboardButton",
    "KeyboardTab",
    "LanguageDefinition",
    "Prediction",
    "PredictionReason",
    "SnippetItem",
    "TemplateMatch",
    "TemplateMatchType",
    "Token",
    "TokenType",
    "TypingContext",
]
