# smartkeys/expansion.py
"""
Smart-text expansion: small, context-dependent edits to a button's literal
insertion text. Call it right before inserting; it does not affect ranking.

Language rules run first (registered per language key), then the common
rules. The first rule that returns a string wins; with no match the
literal text is returned unchanged.
"""

from __future__ import annotations
import re
from typing import Callable, Dict, List, Optional

from . import config as CFG
from .idioms import unclosed_bracket
from .models import LanguageDefinition, SnippetItem, TypingContext

ExpansionRule = Callable[[SnippetItem, TypingContext, LanguageDefinition], Optional[str]]

_RULES: Dict[str, List[ExpansionRule]] = {}


def register_rule(language_key: str, rule: ExpansionRule) -> None:
    _RULES.setdefault(language_key, []).append(rule)


def _next_indent(context: TypingContext) -> str:
    return " " * (context.line_indentation + CFG.INDENT_WIDTH)


# ---------------------------------------------------------- rule builders

def membership_rule(label: str, loop_var: str) -> ExpansionRule:
    """
    A membership keyword typed right after a single loop variable gets its
    own leading space: "for i" + "in " -> "for i in ".
    """
    pattern = re.compile(loop_var + r"$")

    def rule(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
        if button.label != label or not pattern.search(context.current_line):
            return None
        text = button.text if button.text.endswith(" ") else button.text + " "
        return " " + text.lstrip()

    return rule


def block_opener_rule(label: str, header: str) -> ExpansionRule:
    """
    The block opener after a control-flow header also opens the indented body.

    Not while a bracket is still open on the line (a slice, lambda or dict
    literal inside the header) or when the header already ends with it.
    """
    pattern = re.compile(header)

    def rule(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
        line = context.current_line
        if button.label != label or not pattern.match(line):
            return None
        if unclosed_bracket(line) is not None or line.rstrip().endswith(label):
            return None
        lead = "" if label == ":" or not line or line[-1].isspace() else " "
        return lead + button.text + "\n" + _next_indent(context)

    return rule


# ----------------------------------------------------------- common rules

def _dotted_overlap(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
    # "collections." already typed + "collections.defaultdict(" -> "defaultdict("
    text, line = button.text, context.current_line
    for k in range(len(text) - 1, 0, -1):
        prefix = text[:k]
        if prefix.endswith(".") and line.endswith(prefix):
            return text[k:]
    return None


def _collapse_space(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
    line = context.current_line
    if button.text.startswith(" ") and (not line or line[-1].isspace()):
        return button.text.lstrip(" ")
    return None


def _operator_space(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
    # "x" + "= " -> " = "
    line = context.current_line
    if (
        button.label in language.syntax.operators
        and not button.text.startswith(" ")
        and not button.label.isalpha()
        and line
        and (line[-1].isalnum() or line[-1] in "_)]")
    ):
        return " " + button.text
    return None


def _reindent(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> Optional[str]:
    # lines after the first follow the current line's indentation
    if "\n" not in button.text or not context.line_indentation:
        return None
    pad = context.current_line[:context.line_indentation]
    first, *rest = button.text.split("\n")
    return "\n".join([first] + [pad + line for line in rest])


COMMON_RULES: List[ExpansionRule] = [_dotted_overlap, _collapse_space, _operator_space, _reindent]


def expand(button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> str:
    for rule in _RULES.get(language.key, ()):
        text = rule(button, context, language)
        if text is not None:
            return text
    for rule in COMMON_RULES:
        text = rule(button, context, language)
        if text is not None:
            return text
    return button.text


# ------------------------------------------------------ language registry

_PY_HEADER = r"^\s*(?:if|elif|else|while|for|def|class|try|except|finally|with)\b"
_BRACE_HEADER = r"^\s*(?:\}\s*)?(?:if|else|while|for|foreach|switch|catch|try|do|function)\b"
_GO_HEADER = r"^\s*(?:\}\s*)?(?:if|else|for|switch|func)\b"
_RUST_HEADER = r"^\s*(?:\}\s*)?(?:if|else|while|for|loop|match|fn|pub\s+fn)\b"

register_rule("python", membership_rule("in", r"(?:^|\s)for\s+[A-Za-z_]\w*"))
register_rule("python", block_opener_rule(":", _PY_HEADER))

for _key in ("javascript", "typescript", "java", "cpp", "c", "csharp", "php"):
    register_rule(_key, block_opener_rule("{", _BRACE_HEADER))

register_rule("csharp", membership_rule("in", r"foreach\s*\(\s*(?:\w+\s+)?\w+"))
register_rule("php", membership_rule("as", r"foreach\s*\(\s*\$\w+"))

register_rule("go", block_opener_rule("{", _GO_HEADER))

register_rule("rust", membership_rule("in", r"(?:^|\s)for\s+[A-Za-z_]\w*"))
register_rule("rust", block_opener_rule("{", _RUST_HEADER))
