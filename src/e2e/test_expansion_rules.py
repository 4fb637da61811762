import pytest
from smartkeys.catalog import LanguageCatalog, build_candidate_pool
from smartkeys.context import extract_context
from smartkeys.expansion import expand
from smartkeys.languages import CPP, GO, JAVASCRIPT, PYTHON


def _btn(lang, label):
    pool = build_candidate_pool(LanguageCatalog().tabs(lang))
    return next(b for b in pool if b.label == label)


def _expand(lang, line, label):
    return expand(_btn(lang, label), extract_context(line, len(line)), lang)


@pytest.mark.parametrize("lang, line, label, expected", [
    # membership keyword right after a single loop variable
    (PYTHON, "for i", "in", " in "),
    (PYTHON, "for i ", "in", "in "),
    # block opener after a control-flow header opens an indented body
    (PYTHON, "if x > 0", ":", ":\n    "),
    (PYTHON, "    while ok", ":", ":\n        "),
    (CPP, "if (x)", "{", " {\n    "),
    (GO, "for i := 0; i < n; i++ ", "{", "{\n    "),
    # already typed dotted prefix is not repeated
    (PYTHON, "x = collections.", "defaultdict", "defaultdict("),
    (CPP, "v.", ".size()", "size()"),
    # spacing around operators
    (CPP, "x ", "=", "= "),
    (PYTHON, "x", "=", " = "),
    # nothing to adjust
    (PYTHON, "", "print", "print("),
    (PYTHON, "d = {'a'", ":", ":"),
    # no block opener while a bracket is open or the opener is already there
    (PYTHON, "if s[", ":", ":"),
    (PYTHON, "for x in sorted(a, key=lambda k", ":", ":"),
    (PYTHON, "while {1: k", ":", ":"),
    (PYTHON, "if x > 0:", ":", ":"),
    (CPP, "if (x", "{", "{"),
    (CPP, "if (x) {", "{", "{"),
    (JAVASCRIPT, "function foo(a", "{", "{"),
    # brackets inside quotes do not count
    (PYTHON, "if s == '['", ":", ":\n    "),
])
def test_expand(lang, line, label, expected):
    assert _expand(lang, line, label) == expected


@pytest.mark.parametrize("lang, text, label, expected", [
    (PYTHON, "def f():\n    ", "if", "if condition:\n        "),
    (PYTHON, "x = 1\n\t", "if", "if condition:\n\t    "),
    (CPP, "int main() {\n    ", "if", "if (condition) {\n        \n    }"),
    # no indentation, literal text
    (PYTHON, "", "if", "if condition:\n    "),
])
def test_multiline_snippet_follows_current_indentation(lang, text, label, expected):
    ctx = extract_context(text, len(text))
    assert expand(_btn(lang, label), ctx, lang) == expected
