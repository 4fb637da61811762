# smartkeys/models.py
"""
Data models for the prediction engine.

Everything here is a small, focused value type:

- SnippetItem / KeyboardTab: catalog entries as the keyboard shows them.
- LanguageSyntax / LanguageDefinition: the static per-language tables.
- TypingContext: the shallow lexical signal around the cursor.
- Token: one classified slice of a source line.
- TemplateMatch: one placeholder occurrence in rendered code.
- Prediction: one ranked candidate returned to the keyboard.

The closed enums (TokenType, TemplateMatchType, PredictionReason) carry
string values so they serialize to JSON unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class TokenType(str, Enum):
    DEFAULT = "default"
    KEYWORD = "keyword"
    BUILTIN = "builtin"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"


class TemplateMatchType(str, Enum):
    FUNCTION = "function"
    CLASS = "class"
    VARIABLE = "variable"
    CONDITION = "condition"
    MODULE = "module"
    TYPE = "type"


class PredictionReason(str, Enum):
    CONTEXTUAL = "contextual"   # affinity list hit (operator or last word)
    IDIOM = "idiom"             # language-specific partial construct
    NEWLINE = "newline"         # common line starter on a blank line


@dataclass(frozen=True)
class SnippetItem:
    """
    One keyboard button.

    `label` is what the button shows and is also the key the scoring engine
    compares against affinity lists. `text` is inserted verbatim on tap and
    may span several lines.
    """
    id: str
    label: str
    text: str


KeyboardButton = SnippetItem


@dataclass(frozen=True)
class KeyboardTab:
    key: str
    label: str
    data: Tuple[SnippetItem, ...]


@dataclass(frozen=True)
class BlockComment:
    start: str
    end: str


@dataclass(frozen=True)
class LanguageSyntax:
    keywords: frozenset
    builtins: frozenset
    operators: Tuple[str, ...]
    string_delimiters: frozenset
    comment_start: str
    block_comment: Optional[BlockComment] = None


@dataclass(frozen=True, eq=False)  # identity hash: the tables are plain dicts
class LanguageDefinition:
    """
    Immutable description of one programming language.

    Attributes
    ----------
    key : str
        Unique identifier across the catalog ("python", "cpp", ...).
    name : str
        Display name.
    file_extensions : frozenset
        Lower-case suffixes without the dot.
    snippets : Tuple[KeyboardTab, ...]
        Button categories in declaration order (basic, control flow,
        functions, data types, collections, symbols).
    sequences : Mapping[str, Tuple[str, ...]]
        Token label -> labels that plausibly follow it, most likely first.
    syntax : LanguageSyntax
        Keyword/builtin sets and delimiters for the tokenizer.
    starters : Mapping[str, float]
        Line-starting label -> desirability weight in [0, 1].
    placeholder_values : Mapping[TemplateMatchType, Tuple[str, ...]]
        Canonical fill suggestions per placeholder type.
    """
    key: str
    name: str
    file_extensions: frozenset
    snippets: Tuple[KeyboardTab, ...]
    sequences: Mapping[str, Tuple[str, ...]]
    syntax: LanguageSyntax
    starters: Mapping[str, float] = field(default_factory=dict)
    placeholder_values: Mapping[TemplateMatchType, Tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class TypingContext:
    last_word: str
    current_line: str
    is_new_line: bool
    line_indentation: int


@dataclass(frozen=True)
class Token:
    text: str
    type: TokenType


@dataclass(frozen=True)
class TemplateMatch:
    placeholder: str
    start: int
    end: int
    type: TemplateMatchType


@dataclass(frozen=True)
class Prediction:
    button: SnippetItem
    score: float
    reason: PredictionReason

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.button.id,
            "label": self.button.label,
            "text": self.button.text,
            "score": round(self.score, 4),
            "reason": self.reason.value,
        }
