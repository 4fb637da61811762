# smartkeys/context.py
from __future__ import annotations
import re

from .models import TypingContext

# /* ~~~ lastWord ignores whitespace and bracket/separator characters ~~~ */
_WORD_SPLIT = re.compile(r"[\s()\[\]{},;]+")


def current_line_bounds(full_text: str, offset: int) -> tuple[int, int]:
    """(start, end) of the line holding `offset`; end excludes the newline."""
    start = full_text.rfind("\n", 0, offset) + 1
    end = full_text.find("\n", offset)
    if end == -1:
        end = len(full_text)
    return start, end


def extract_context(full_text: str, cursor_offset: int) -> TypingContext:
    """
    Derive the typing context for a cursor position.

    Total over any offset: values outside [0, len(full_text)] are clamped.
    """
    offset = max(0, min(int(cursor_offset), len(full_text)))
    start, end = current_line_bounds(full_text, offset)
    current_line = full_text[start:end]

    pieces = [p for p in _WORD_SPLIT.split(full_text[start:offset]) if p]
    last_word = pieces[-1] if pieces else ""

    stripped = current_line.lstrip()
    return TypingContext(
        last_word=last_word,
        current_line=current_line,
        is_new_line=not current_line.strip(),
        line_indentation=len(current_line) - len(stripped),
    )
