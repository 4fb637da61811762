import pytest
from smartkeys.languages import CPP, PYTHON, SUPPORTED_LANGUAGES
from smartkeys.models import Token, TokenType
from smartkeys.tokenizer import ScanMode, classify, classify_text, next_mode

LINES = [
    "if x == 1:  # check",
    'print("a \\" b")',
    "s = 'unterminated",
    "int x = 5; /* note */ y++;",
    "/* open comment",
    'x = "a" # c "b"',
    "tab\tsep  ",
    "é = 'ü'",
    "",
    "   ",
]


@pytest.mark.parametrize("lang", SUPPORTED_LANGUAGES, ids=lambda lang: lang.key)
def test_classify_is_lossless(lang):
    for line in LINES:
        assert "".join(t.text for t in classify(line, lang)) == line


def test_python_condition_with_trailing_comment():
    tokens = classify("if x == 1:  # check", PYTHON)
    pairs = [(t.text, t.type) for t in tokens]

    assert pairs[0] == ("if", TokenType.KEYWORD)
    assert ("x", TokenType.DEFAULT) in pairs
    assert ("1", TokenType.NUMBER) in pairs
    eq = [t for t in tokens if t.text == "="]
    assert len(eq) == 2 and all(t.type is TokenType.DEFAULT for t in eq)
    assert tokens[-1] == Token("# check", TokenType.COMMENT)


def test_builtins_and_boundaries():
    tokens = classify("print(len(x))", PYTHON)
    assert tokens[0] == Token("print", TokenType.BUILTIN)
    assert tokens[1] == Token("(", TokenType.DEFAULT)
    assert tokens[2] == Token("len", TokenType.BUILTIN)


def test_escaped_quote_does_not_close_string():
    tokens = classify('s = "a\\"b" + c', PYTHON)
    strings = [t.text for t in tokens if t.type is TokenType.STRING]
    assert strings == ['"a\\"b"']
    assert tokens[-1] == Token("c", TokenType.DEFAULT)


def test_unterminated_string_keeps_string_type():
    tokens = classify("s = 'abc", PYTHON)
    assert tokens[-1] == Token("'abc", TokenType.STRING)


def test_block_comment_on_one_line():
    tokens = classify("x /* a */ y", CPP)
    assert Token("/* a */", TokenType.COMMENT) in tokens
    assert tokens[-1] == Token("y", TokenType.DEFAULT)


def test_block_comment_state_is_not_carried_across_lines():
    lines = classify_text("/* start\nstill inside */", CPP)
    assert lines[0] == [Token("/* start", TokenType.COMMENT)]
    assert all(t.type is not TokenType.COMMENT for t in lines[1])


def test_transition_function_in_isolation():
    assert next_mode(ScanMode.NORMAL, "# x", 0, PYTHON) == (ScanMode.COMMENT, None, 1)
    assert next_mode(ScanMode.NORMAL, "'a'", 0, PYTHON) == (ScanMode.STRING, "'", 1)
    # escaped closer stays in the string
    assert next_mode(ScanMode.STRING, 'a\\"', 2, PYTHON, '"') == (ScanMode.STRING, '"', 0)
    assert next_mode(ScanMode.STRING, 'a"', 1, PYTHON, '"') == (ScanMode.NORMAL, None, 1)
    # a line comment only ends at end of line
    assert next_mode(ScanMode.COMMENT, "# */", 2, PYTHON, None) == (ScanMode.COMMENT, None, 0)
