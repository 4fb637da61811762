import pytest
from smartkeys.models import TemplateMatchType as T
from smartkeys.templates import find_all, find_at, parse_match_type, substitute


def test_find_all_is_sorted_and_typed():
    text = "def function(var):\n    return var"
    found = find_all(text)
    assert [m.placeholder for m in found] == ["function", "var", "var"]
    assert [m.type for m in found] == [T.FUNCTION, T.VARIABLE, T.VARIABLE]
    assert [m.start for m in found] == sorted(m.start for m in found)
    assert text[found[0].start:found[0].end] == "function"


def test_whole_words_only():
    assert find_all("variable = types + modules") == []
    assert [m.type for m in find_all("class ClassName:")] == [T.CLASS]


def test_find_at_uses_inclusive_span():
    text = "for var in range(var):"
    m = find_at(text, 4)
    assert (m.start, m.end, m.type) == (4, 7, T.VARIABLE)
    assert find_at(text, 7) == m
    assert find_at(text, 0) is None


def test_substitute_is_a_literal_splice():
    text = "def function(var):"
    m = find_all(text)[0]
    out = substitute(text, m, "solve")
    assert out == "def solve(var):"
    assert all((x.start, x.end) != (m.start, m.end) for x in find_all(out))
    # a replacement that is itself a marker is found again
    again = substitute(text, m, "type")
    assert find_at(again, m.start).type is T.TYPE


def test_parse_match_type():
    assert parse_match_type("ClassName") is T.CLASS
    assert parse_match_type("variable") is T.VARIABLE
    assert parse_match_type("MODULE") is T.MODULE
    with pytest.raises(ValueError):
        parse_match_type("nope")
