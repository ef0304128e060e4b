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


def _resource(**overrides):
    payload = {
        "name": "Mage: The Ascension 20th Anniversary",
        "type": "Book",
        "category": "Core",
        "description": "The core rulebook.",
        "url": "https://example.org/m20",
        "author": "Onyx Path",
        "imageUrl": "",
        "featured": False,
    }
    payload.update(overrides)
    return payload


def test_resource_create(client):
    r = client.post("/api/resources", json=_resource(featured=True))
    assert r.status_code == 201
    data = r.json
    assert data["featured"] is True
    assert data["imageUrl"] is None
    assert data["author"] == "Onyx Path"


def test_resource_missing_fields_is_400(client):
    r = client.post("/api/resources", json=_resource(description="   "))
    assert r.status_code == 400
    assert r.json == {"error": "Missing required fields"}


def test_resources_featured_first_then_type_then_name(client):
    client.post("/api/resources", json=_resource(name="Zeta Guide", type="Website"))
    client.post("/api/resources", json=_resource(name="Beta Book", type="Book"))
    client.post("/api/resources", json=_resource(name="Alpha Book", type="Book"))
    client.post("/api/resources", json=_resource(name="Omega Site", type="Website", featured=True))

    names = [r["name"] for r in client.get("/api/resources").json]
    assert names == ["Omega Site", "Alpha Book", "Beta Book", "Zeta Guide"]


def test_resource_featured_string_flag(client):
    r = client.post("/api/resources", json=_resource(featured="true"))
    assert r.json["featured"] is True


def test_resource_detail_update_delete(client):
    created = client.post("/api/resources", json=_resource()).json
    rid = created["id"]

    assert client.get(f"/api/resources/{rid}").json["name"] == created["name"]

    r = client.put(f"/api/resources/{rid}", json=_resource(name="Book of Secrets", featured=True))
    assert r.status_code == 200
    assert r.json["name"] == "Book of Secrets"
    assert r.json["featured"] is True

    r = client.delete(f"/api/resources/{rid}")
    assert r.status_code == 200
    assert r.json == {"message": "Resource deleted successfully"}

    r = client.get(f"/api/resources/{rid}")
    assert r.status_code == 404
    assert r.json == {"error": "Resource not found"}


def test_resource_update_missing_fields_is_400(client):
    rid = client.post("/api/resources", json=_resource()).json["id"]
    r = client.put(f"/api/resources/{rid}", json={"name": "Only a name"})
    assert r.status_code == 400
