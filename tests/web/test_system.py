"""
Web tests for the health endpoint and landing page.
"""


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Welcome to Cinelog" in r.text


def test_static_css(client):
    r = client.get("/static/style.css")
    assert r.status_code == 200


def test_health(client, movie_id):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert data["users"] == 1
    assert data["movies"] == 1
    assert data["reviews"] == 0
