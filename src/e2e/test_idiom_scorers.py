import pytest
from smartkeys.idioms import open_call, scorer_for, unclosed_bracket
from smartkeys.languages import CPP, CSHARP, GO, JAVA, JAVASCRIPT, PHP, PYTHON, RUST, TYPESCRIPT


@pytest.mark.parametrize("line, label, expected", [
    ("for ", "i", 1.0),
    ("for ", "in", 0.0),
    ("for i ", "in", 1.0),
    ("for i in ", "range", 1.0),
    ("for i in ", "enumerate", 0.9),
    ("for i, x in ", "enumerate", 1.0),
    ("for i in range(", "len", 0.9),
    ("for i in range(n", ")", 1.0),
    ("print(total", ")", 0.85),
    ("if x > 0", ":", 1.0),
    ("if x > ", ":", 0.0),
    ("while ok", ":", 1.0),
    ("else", ":", 1.0),
    ("def solve(a, b)", ":", 1.0),
    ("class Node", ":", 1.0),
    ("count", "=", 0.9),
    ("if count ", "==", 0.9),
    ("print", "(", 0.7),
    ("x = collections.", "defaultdict", 0.8),
    ("heapq.", "heappush", 0.8),
])
def test_python_rules(line, label, expected):
    assert scorer_for(PYTHON).score(line, label) == pytest.approx(expected)


@pytest.mark.parametrize("lang, line, label, expected", [
    (JAVASCRIPT, "for (", "let", 1.0),
    (JAVASCRIPT, "for (let i", "=", 1.0),
    (JAVA, "for (int i = 0", ";", 1.0),
    (JAVA, "for (int i = 0; i ", "<", 1.0),
    (JAVA, "for (int i = 0; i < n", ";", 1.0),
    (JAVA, "System.out.", "System.out.println", 0.9),
    (CPP, "int ", "var", 1.0),
    (CPP, "int ", ";", 0.0),
    (CPP, "int x", "=", 1.0),
    (CPP, "int x = 5", ";", 1.0),
    (CPP, "if (x > 0)", "{", 1.0),
    (CPP, "} else", "{", 1.0),
    (CPP, "cout << x", ";", 0.9),
    (CPP, "v.", ".size()", 0.7),
    (CPP, "int main()", "{", 1.0),
    (CPP, "return x", ";", 1.0),
    (JAVASCRIPT, "console.log(x", ")", 1.0),
    (JAVASCRIPT, "foo(x)", ";", 1.0),
    (TYPESCRIPT, "let x: ", "number", 0.9),
    (CSHARP, "foreach (", "var", 1.0),
    (CSHARP, "foreach (var item ", "in", 1.0),
    (PHP, "foreach ($items ", "as", 1.0),
    (PHP, "$", "name", 1.0),
])
def test_brace_language_rules(lang, line, label, expected):
    assert scorer_for(lang).score(line, label) == pytest.approx(expected)


@pytest.mark.parametrize("line, label, expected", [
    ("for i ", ":=", 1.0),
    ("for i, v := ", "range", 1.0),
    ("for _, v := range items", "{", 1.0),
    ("if err != nil", "{", 1.0),
    ("var ", "name", 1.0),
    ("total", ":=", 0.9),
    ("fmt.", "fmt.Println", 0.9),
])
def test_go_rules(line, label, expected):
    assert scorer_for(GO).score(line, label) == pytest.approx(expected)


@pytest.mark.parametrize("line, label, expected", [
    ("let ", "mut", 1.0),
    ("let mut ", "name", 1.0),
    ("let x", ":", 1.0),
    ("let x: ", "i32", 1.0),
    ("let x = 5", ";", 1.0),
    ("for i ", "in", 1.0),
    ("while n > 0", "{", 1.0),
    ("println!", "(", 0.7),
])
def test_rust_rules(line, label, expected):
    assert scorer_for(RUST).score(line, label) == pytest.approx(expected)


def test_open_call_finds_innermost_unclosed_paren():
    assert open_call("print(a, (b)") == ("print", "a, (b)")
    assert open_call("x = (1 + f(2") == ("f", "2")
    assert open_call("f(x)") is None
    # a paren inside quotes does not close the call
    assert open_call('f(")"') == ("f", '")"')
    assert open_call('f(")")') is None


def test_unclosed_bracket_reports_innermost_opener():
    assert unclosed_bracket("if s[") == "["
    assert unclosed_bracket("f(a, {1: [2]") == "{"
    assert unclosed_bracket("d[k](x)") is None
    assert unclosed_bracket("s == '('") is None
    # a paren still open under a closed slice
    assert open_call("f(a[1]") == ("f", "a[1]")
