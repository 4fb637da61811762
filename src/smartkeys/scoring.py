# smartkeys/scoring.py
"""
Contextual ranking of keyboard buttons.

Per candidate the first rule producing a positive score wins:

  1. affinity  - trailing assignment operator, else the last word, looked up
                 in the language's `sequences`; score = 1.0 - 0.1 * index
  2. idiom     - the language's registered IdiomScorer
  3. new line  - the language's `starters`, only on a blank line

Candidates that score 0 are dropped; the rest are sorted descending with
ties kept in catalog order, then truncated to `limit`.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from . import config as CFG
from .idioms import IdiomScorer, scorer_for
from .models import LanguageDefinition, Prediction, PredictionReason, SnippetItem, TypingContext

log = logging.getLogger(__name__)

# "x = ", "total += " ... but not "==", "!=", "<=", ">="
_TRAILING_OPERATOR = re.compile(r"(?<![=!<>])(\+=|-=|\*=|/=|%=|=)\s*$")
# a word followed by "(" that has not been closed yet
_OPEN_CALL = re.compile(r"\w\([^)]*$")

VARIABLE_PLACEHOLDER = "var"


def _index_of(affinity: Sequence[str], label: str) -> Optional[int]:
    folded = label.casefold()
    for i, entry in enumerate(affinity):
        if entry.casefold() == folded:
            return i
    return None


def _affinity_for_word(word: str, language: LanguageDefinition) -> Optional[Sequence[str]]:
    sequences = language.sequences
    if not word:
        return None
    found = sequences.get(word) or sequences.get(word.casefold())
    if found is None and "." in word:
        # "v.size" -> ".size"
        found = sequences.get("." + word.rsplit(".", 1)[-1])
    return found


def trailing_operator(line: str) -> Optional[str]:
    m = _TRAILING_OPERATOR.search(line)
    return m.group(1) if m else None


def sequence_score(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> float:
    """Rule 1: affinity of `button` to the pending operator or the last word."""
    op = trailing_operator(context.current_line)
    if op is not None:
        # compound assignments share the plain "=" list unless they have their own
        affinity = language.sequences.get(op) or language.sequences.get("=") or ()
    else:
        if context.last_word == VARIABLE_PLACEHOLDER and _OPEN_CALL.search(context.current_line):
            return 0.0
        affinity = _affinity_for_word(context.last_word, language) or ()

    idx = _index_of(affinity, button.label)
    if idx is None:
        return 0.0
    return max(0.0, 1.0 - CFG.SEQUENCE_STEP * idx)


def idiom_score(button: SnippetItem, context: TypingContext, scorer: IdiomScorer) -> float:
    """Rule 2: per-language partial-construct recognizer."""
    return scorer.score(context.current_line, button.label)


def newline_score(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> float:
    """Rule 3: starter weight, unreachable unless the line is blank."""
    if not context.is_new_line:
        return 0.0
    return float(language.starters.get(button.label, 0.0))


def score_candidate(
    button: SnippetItem,
    context: TypingContext,
    language: LanguageDefinition,
    scorer: Optional[IdiomScorer] = None,
) -> Tuple[float, Optional[PredictionReason]]:
    score = sequence_score(button, context, language)
    if score > 0:
        return score, PredictionReason.CONTEXTUAL
    score = idiom_score(button, context, scorer or scorer_for(language))
    if score > 0:
        return score, PredictionReason.IDIOM
    score = newline_score(button, context, language)
    if score > 0:
        return score, PredictionReason.NEWLINE
    return 0.0, None


def rank(
    candidates: Iterable[SnippetItem],
    context: TypingContext,
    language: LanguageDefinition,
    limit: int = CFG.TOP_K,
) -> List[Prediction]:
    """Pure: same inputs, same output; no history or catalog state is touched."""
    if limit <= 0:
        return []
    scorer = scorer_for(language)
    scored: List[Prediction] = []
    for button in candidates:
        score, reason = score_candidate(button, context, language, scorer)
        if score > 0 and reason is not None:
            scored.append(Prediction(button=button, score=score, reason=reason))
    # list.sort is stable: equal scores keep catalog order
    scored.sort(key=lambda p: p.score, reverse=True)
    return scored[:limit]


def record_selection(button: SnippetItem, context: TypingContext) -> None:
    """
    Usage tracking hook. Selections do not influence future scores; the call
    only leaves a debug trace so an adaptive ranker can be plugged in here.
    """
    log.debug("selection confirmed: %s (last_word=%r)", button.id, context.last_word)
