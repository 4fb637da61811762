# smartkeys/tokenizer.py
"""
Line tokenizer used for highlighting and as line state for prediction.

The scan is a three-state machine (normal / in-string / in-comment) over a
single line. Nothing is carried across lines, so a line sitting inside a
multi-line block comment is classified as ordinary code.

Every call is lossless: "".join(t.text for t in classify(line, lang)) == line.
"""

from __future__ import annotations
import re
from enum import Enum
from typing import List, Optional, Tuple

from .models import LanguageDefinition, Token, TokenType

# Boundary characters end a pending word and become their own default token
BOUNDARY_CHARS = frozenset("()[]{},.:;=+-*/<>!&|%")
ESCAPE_CHAR = "\\"

_NUMBER = re.compile(r"[0-9]+")


class ScanMode(Enum):
    NORMAL = "normal"
    STRING = "string"
    COMMENT = "comment"


def next_mode(
    mode: ScanMode,
    line: str,
    pos: int,
    language: LanguageDefinition,
    closer: Optional[str] = None,
) -> Tuple[ScanMode, Optional[str], int]:
    """
    Transition function of the scanner.

    Returns (new_mode, closer, width): `closer` is the text that will end the
    new mode (quote character or block-comment end; None means "end of line"),
    and `width` is how many characters the transition consumes. A width of 0
    means no transition happened at `pos`.
    """
    syntax = language.syntax
    if mode is ScanMode.NORMAL:
        if syntax.comment_start and line.startswith(syntax.comment_start, pos):
            return ScanMode.COMMENT, None, len(syntax.comment_start)
        block = syntax.block_comment
        if block and line.startswith(block.start, pos):
            return ScanMode.COMMENT, block.end, len(block.start)
        ch = line[pos]
        if ch in syntax.string_delimiters:
            return ScanMode.STRING, ch, 1
        return mode, closer, 0

    if mode is ScanMode.STRING:
        if line[pos] == closer and not (pos > 0 and line[pos - 1] == ESCAPE_CHAR):
            return ScanMode.NORMAL, None, 1
        return mode, closer, 0

    # comment: only a block comment can end on this line
    if closer and line.startswith(closer, pos):
        return ScanMode.NORMAL, None, len(closer)
    return mode, closer, 0


def _word_type(text: str, language: LanguageDefinition) -> TokenType:
    syntax = language.syntax
    if text in syntax.keywords:
        return TokenType.KEYWORD
    if text in syntax.builtins:
        return TokenType.BUILTIN
    if _NUMBER.fullmatch(text):
        return TokenType.NUMBER
    return TokenType.DEFAULT


def classify(line: str, language: LanguageDefinition) -> List[Token]:
    """Split one line into typed tokens, left to right, without overlaps."""
    tokens: List[Token] = []
    pending: List[str] = []
    mode = ScanMode.NORMAL
    closer: Optional[str] = None

    def flush(kind: Optional[TokenType] = None) -> None:
        if not pending:
            return
        text = "".join(pending)
        pending.clear()
        tokens.append(Token(text, kind if kind is not None else _word_type(text, language)))

    i = 0
    n = len(line)
    while i < n:
        new_mode, new_closer, width = next_mode(mode, line, i, language, closer)

        if mode is ScanMode.NORMAL:
            if width:
                flush(TokenType.DEFAULT)
                pending.append(line[i:i + width])
                mode, closer = new_mode, new_closer
                i += width
                continue
            ch = line[i]
            if ch.isspace() or ch in BOUNDARY_CHARS:
                flush()
                tokens.append(Token(ch, TokenType.DEFAULT))
            else:
                pending.append(ch)
            i += 1
            continue

        if width:
            pending.append(line[i:i + width])
            flush(TokenType.STRING if mode is ScanMode.STRING else TokenType.COMMENT)
            mode, closer = new_mode, new_closer
            i += width
            continue

        pending.append(line[i])
        i += 1

    # unterminated strings and comments keep their in-progress classification
    if mode is ScanMode.STRING:
        flush(TokenType.STRING)
    elif mode is ScanMode.COMMENT:
        flush(TokenType.COMMENT)
    else:
        flush()
    return tokens


def classify_text(text: str, language: LanguageDefinition) -> List[List[Token]]:
    """Classify every line of `text` independently."""
    return [classify(line, language) for line in text.split("\n")]
