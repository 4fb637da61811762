from pathlib import Path

import pytest
from smartkeys.context import extract_context
from smartkeys.customization import add_button
from smartkeys.engine import Engine
from smartkeys.models import TemplateMatchType as T, TokenType


@pytest.mark.e2e
def test_engine_predicts_and_expands():
    eng = Engine(db_dsn="memory://")
    try:
        py = eng.language("python")
        rows = eng.predict("for ", language=py)
        assert rows[0].button.label == "i"

        in_btn = next(b for b in eng.candidate_pool(py) if b.label == "in")
        ctx = extract_context("for i", 5)
        assert eng.expand_insertion_text(in_btn, ctx, py) == " in "
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_language_resolution_order():
    eng = Engine(db_dsn="memory://")
    try:
        assert eng.language(filename="src/main.rs").key == "rust"
        assert eng.language(key="go", filename="x.py").key == "go"
        assert eng.language(key="nope", filename="a.cpp").key == "cpp"
        assert eng.language().key == "python"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_selection_recording_does_not_change_ranking():
    eng = Engine(db_dsn="memory://")
    try:
        py = eng.language("python")
        before = eng.predict("x = ", language=py)
        ctx = extract_context("x = ", 4)
        for _ in range(5):
            eng.on_selection_confirmed(before[-1].button, ctx)
        assert eng.predict("x = ", language=py) == before
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_cursor_in_earlier_line():
    eng = Engine(db_dsn="memory://")
    try:
        text = "for \nprint(x)"
        rows = eng.predict(text, cursor=4, language=eng.language("python"))
        assert rows[0].button.label == "i"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_highlight_lines():
    eng = Engine(db_dsn="memory://")
    try:
        lines = eng.highlight("x = 1\n# done", eng.language("python"))
        assert len(lines) == 2
        assert lines[1][0].type is TokenType.COMMENT
        assert eng.classify("while", eng.language("python"))[0].type is TokenType.KEYWORD
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_history_and_customisation_survive_restart(tmp_path: Path):
    dsn = f"sqlite:///{tmp_path / 'smartkeys.sqlite'}"

    eng = Engine(db_dsn=dsn)
    py = eng.language("python")
    eng.templates.record_confirmed(T.CLASS, "Graph")
    eng.customizations.save(py, add_button(py.snippets, 0, "pp", "pprint("))
    eng.shutdown()
    eng.shutdown()  # second call is harmless

    eng = Engine(db_dsn=dsn)
    try:
        assert eng.templates.values(T.CLASS)[0] == "Graph"
        labels = [b.label for b in eng.candidate_pool(py)]
        assert "pp" in labels
        assert eng.find_button(py, "py_1").label == "="
    finally:
        eng.shutdown()
