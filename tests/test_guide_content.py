import pytest

from app.grimoire import create_app
from app.grimoire.models import Base

SECTIONS = ("concept", "attributes", "abilities", "spheres", "backgrounds", "freebies")


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("ADMIN_PASSWORD", "test-admin")

    app = create_app()
    Base.metadata.create_all(bind=app.extensions["sqlalchemy_engine"])
    return app.test_client()


def test_guide_content_empty_by_default(client):
    r = client.get("/api/guide-expanded-content")
    assert r.status_code == 200
    assert r.json == {name: "" for name in SECTIONS}


def test_guide_content_update_and_clear(client):
    r = client.put(
        "/api/guide-expanded-content",
        json={"password": "test-admin", "concept": "Who were you before?", "freebies": "15 points", "unknown": "x"},
    )
    assert r.status_code == 200
    assert r.json["concept"] == "Who were you before?"
    assert "unknown" not in r.json

    client.put("/api/guide-expanded-content", json={"password": "test-admin", "concept": None})
    data = client.get("/api/guide-expanded-content").json
    assert data["concept"] == ""
    assert data["freebies"] == "15 points"


def test_guide_content_requires_admin_password(client):
    r = client.put("/api/guide-expanded-content", json={"concept": "No password"})
    assert r.status_code == 401
    assert r.json == {"error": "Unauthorized"}
    assert client.get("/api/guide-expanded-content").json["concept"] == ""
