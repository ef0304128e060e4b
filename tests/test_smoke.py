import pytest

from app.grimoire import create_app
from app.grimoire.models import Base


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("ADMIN_PASSWORD", "test-admin")

    app = create_app()
    Base.metadata.create_all(bind=app.extensions["sqlalchemy_engine"])
    return app.test_client()


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["ok"] is True


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_unknown_route_is_json_404(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    assert r.json == {"error": "Not found"}


def test_wrong_method_is_json_405(client):
    r = client.patch("/api/rotes")
    assert r.status_code == 405
    assert "error" in r.json


def test_reference_data(client):
    r = client.get("/api/reference")
    assert r.status_code == 200
    data = r.json
    assert "Order of Hermes" in data["traditions"]
    assert "Iteration X" in data["technocracyConventions"]
    assert data["sphereAliases"]["Data"] == "Correspondence"
    assert data["sphereLevels"] == [0, 1, 2, 3, 4, 5]
    assert data["traditionCategories"]["traditions"]["label"] == "Nine Traditions"
    assert data["allTraditions"] == sorted(data["allTraditions"])


def test_every_response_gets_a_request_scoped_session_closed(client):
    # two sequential requests must not share state through a leaked session
    assert client.get("/api/rotes").status_code == 200
    assert client.get("/api/rotes").status_code == 200
