import dataclasses

import pytest
from smartkeys import idioms
from smartkeys.catalog import LanguageCatalog, build_candidate_pool
from smartkeys.context import extract_context
from smartkeys.languages import CPP, PYTHON
from smartkeys.models import PredictionReason
from smartkeys.scoring import newline_score, rank, sequence_score


def _pool(lang):
    return build_candidate_pool(LanguageCatalog().tabs(lang))


def _btn(pool, label):
    return next(b for b in pool if b.label == label)


def _ctx(line):
    return extract_context(line, len(line))


def test_affinity_order_is_a_ranked_preference():
    pool = _pool(PYTHON)
    ctx = _ctx("for ")
    assert sequence_score(_btn(pool, "i"), ctx, PYTHON) == pytest.approx(1.0)
    assert sequence_score(_btn(pool, "var"), ctx, PYTHON) == pytest.approx(0.9)
    assert sequence_score(_btn(pool, "while"), ctx, PYTHON) == 0.0


def test_python_for_header_predicts_loop_variable_first():
    rows = rank(_pool(PYTHON), _ctx("for "), PYTHON, 6)
    assert [p.button.label for p in rows] == ["i", "var"]
    assert rows[0].score == pytest.approx(1.0)
    assert rows[0].score - rows[1].score == pytest.approx(0.1)


def test_python_loop_variable_predicts_membership_keyword():
    rows = rank(_pool(PYTHON), _ctx("for i "), PYTHON, 6)
    assert rows[0].button.label == "in"
    assert rows[0].score == pytest.approx(1.0)


def test_cpp_type_waits_for_a_name():
    pool = _pool(CPP)
    rows = rank(pool, _ctx("int "), CPP, 6)
    scores = {p.button.label: p.score for p in rows}
    assert scores["var"] == pytest.approx(1.0)
    assert ";" not in scores


def test_trailing_operator_uses_its_affinity_list():
    rows = rank(_pool(PYTHON), _ctx("x = "), PYTHON, 3)
    assert [p.button.label for p in rows] == ["var", "0", "1"]
    assert all(p.reason is PredictionReason.CONTEXTUAL for p in rows)


def test_compound_assignment_falls_back_to_plain_assignment_list():
    rows = rank(_pool(PYTHON), _ctx("total += "), PYTHON, 1)
    assert rows[0].button.label == "var"


def test_last_word_lookup_is_case_folded():
    pool = _pool(PYTHON)
    assert sequence_score(_btn(pool, "i"), _ctx("FOR "), PYTHON) == pytest.approx(1.0)


def test_variable_inside_open_call_suppresses_affinity():
    pool = _pool(PYTHON)
    eq = _btn(pool, "=")
    assert sequence_score(eq, _ctx("var"), PYTHON) == pytest.approx(0.9)
    assert sequence_score(eq, _ctx("print(var"), PYTHON) == 0.0


def test_new_line_starters_only_on_blank_lines():
    pool = _pool(PYTHON)
    assert newline_score(_btn(pool, "if"), _ctx("x"), PYTHON) == 0.0
    assert newline_score(_btn(pool, "if"), _ctx("    "), PYTHON) == pytest.approx(0.9)

    rows = rank(pool, _ctx("x"), PYTHON, 6)
    assert rows and all(p.reason is not PredictionReason.NEWLINE for p in rows)
    assert [p.button.label for p in rows] == ["=", "+="]


def test_blank_line_ranks_starters_with_stable_ties():
    rows = rank(_pool(PYTHON), _ctx("    "), PYTHON, 6)
    assert [p.button.label for p in rows] == ["if", "for", "while", "var", "def", "class"]
    assert all(p.reason is PredictionReason.NEWLINE for p in rows)


def test_empty_pool_and_zero_limit():
    assert rank([], _ctx("for "), PYTHON) == []
    assert rank(_pool(PYTHON), _ctx("for "), PYTHON, 0) == []


def test_only_positive_scores_are_returned():
    for line in ("", "for ", "x = ", "if x > 0", "print(", "collections."):
        for p in rank(_pool(PYTHON), _ctx(line), PYTHON, 50):
            assert p.score > 0


class FakeScorer:
    def __init__(self, label, value):
        self.label, self.value = label, value

    def score(self, line, label):
        return self.value if label == self.label else 0.0


def test_registered_scorer_is_used_for_its_language(monkeypatch):
    toy = dataclasses.replace(PYTHON, key="toy", sequences={}, starters={})
    pool = _pool(toy)
    assert rank(pool, _ctx("anything"), toy) == []

    monkeypatch.setitem(idioms._REGISTRY, "toy", FakeScorer("zip", 0.75))
    rows = rank(pool, _ctx("anything"), toy)
    assert [(p.button.label, p.reason) for p in rows] == [("zip", PredictionReason.IDIOM)]
    assert rows[0].score == pytest.approx(0.75)


def test_prediction_serializes_to_plain_dict():
    row = rank(_pool(PYTHON), _ctx("for "), PYTHON, 1)[0]
    assert row.to_dict() == {"id": "py_9", "label": "i", "text": "i", "score": 1.0, "reason": "contextual"}
