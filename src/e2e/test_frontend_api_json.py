import pytest
from smartkeys.engine import Engine
from smartkeys_web.web import app as flask_app


@pytest.fixture
def client(monkeypatch):
    import smartkeys_web.web as webmod
    eng = Engine(db_dsn="memory://")
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_health_and_languages(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["ok"] is True

    langs = client.get("/api/languages").get_json()
    assert len(langs) == 10
    assert langs[0]["key"] == "python"
    assert "py" in langs[0]["extensions"]


@pytest.mark.e2e
def test_predict_endpoint(client):
    r = client.get("/api/predict?text=for%20&lang=python&k=3")
    assert r.status_code == 200
    data = r.get_json()
    assert data["language"] == "python"
    assert data["context"]["last_word"] == "for"
    first = data["predictions"][0]
    for key in ("id", "label", "text", "score", "reason"):
        assert key in first
    assert first["label"] == "i"
    assert len(data["predictions"]) <= 3


@pytest.mark.e2e
def test_predict_infers_language_from_file(client):
    data = client.get("/api/predict?text=int%20&file=main.cpp").get_json()
    assert data["language"] == "cpp"
    assert data["predictions"][0]["label"] == "var"


@pytest.mark.e2e
def test_expand_endpoint(client):
    r = client.get("/api/expand?id=py_19&text=for%20i&lang=python")
    assert r.status_code == 200
    assert r.get_json()["text"] == " in "

    r = client.get("/api/expand?id=nope&text=x&lang=python")
    assert r.status_code == 400
    assert "error" in r.get_json()


@pytest.mark.e2e
def test_classify_and_highlight(client):
    tokens = client.get("/api/classify?line=if%20x&lang=python").get_json()
    assert tokens[0] == {"text": "if", "type": "keyword"}

    r = client.post("/api/highlight", json={"code": "x = 1\n# hi", "lang": "python"})
    assert r.status_code == 200
    lines = r.get_json()["lines"]
    assert len(lines) == 2
    assert lines[1][0] == {"text": "# hi", "type": "comment"}

    r = client.post("/api/highlight", json={"code": 5})
    assert r.status_code == 400


@pytest.mark.e2e
def test_templates_endpoints(client):
    data = client.get("/api/templates?text=def%20function(var)&cursor=5&lang=python").get_json()
    assert data["active"]["placeholder"] == "function"
    assert [m["placeholder"] for m in data["matches"]] == ["function", "var"]
    assert data["suggestions"][0] == "main"

    none = client.get("/api/templates?text=pass&cursor=2").get_json()
    assert none["active"] is None and none["suggestions"] == []

    r = client.post("/api/templates/confirm", json={"type": "variable", "value": "total"})
    assert r.status_code == 200
    body = r.get_json()
    assert body["recorded"] is True
    assert body["values"][0] == "total"

    assert client.post("/api/templates/confirm", json={"type": "variable", "value": "  "}).status_code == 400
    assert client.post("/api/templates/confirm", json={"type": "bogus", "value": "x"}).status_code == 400
