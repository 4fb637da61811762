import pytest
from smartkeys_web.web import app as flask_app


@pytest.mark.e2e
def test_home_page_renders():
    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    html = r.get_data(as_text=True)
    assert "SmartKeys" in html
    assert "/api/predict" in html
