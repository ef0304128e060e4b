"""Tests for the rotes API."""
import pytest

from app.grimoire import create_app
from app.grimoire.db import session_scope
from app.grimoire.models import Base
from app.grimoire.modules.rotes.models import Rote


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("ADMIN_PASSWORD", "test-admin")

    app = create_app()
    Base.metadata.create_all(bind=app.extensions["sqlalchemy_engine"])
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


def _rote(**overrides):
    payload = {
        "name": "The Flickering Ward",
        "tradition": "Order of Hermes",
        "description": "A shimmering barrier against Forces.",
        "spheres": {"Forces": 3, "Prime": 2},
        "level": "Disciple",
        "pageRef": "Book of Shadows, p.142",
    }
    payload.update(overrides)
    return payload


def test_rotes_list_empty(client):
    r = client.get("/api/rotes")
    assert r.status_code == 200
    assert r.json == []


def test_rote_create(client):
    r = client.post("/api/rotes", json=_rote())
    assert r.status_code == 201
    data = r.json
    assert data["id"]
    assert data["name"] == "The Flickering Ward"
    assert data["spheres"] == {"Forces": 3, "Prime": 2}
    assert data["pageRef"] == "Book of Shadows, p.142"
    assert data["createdAt"]


def test_rote_create_without_name_is_400(client):
    payload = _rote()
    del payload["name"]
    r = client.post("/api/rotes", json=payload)
    assert r.status_code == 400
    assert r.json == {"error": "Missing required fields"}


@pytest.mark.parametrize("field", ["tradition", "description", "spheres", "level"])
def test_rote_create_blank_required_field_is_400(client, field):
    r = client.post("/api/rotes", json=_rote(**{field: ""}))
    assert r.status_code == 400


def test_rote_create_rejects_out_of_range_sphere_level(client):
    r = client.post("/api/rotes", json=_rote(spheres={"Forces": 7}))
    assert r.status_code == 400


def test_rote_blank_page_ref_stored_as_null(client):
    r = client.post("/api/rotes", json=_rote(pageRef=""))
    assert r.status_code == 201
    assert r.json["pageRef"] is None


def test_rote_create_with_unparseable_body_is_generic_500(client):
    r = client.post("/api/rotes", data="not json", content_type="application/json")
    assert r.status_code == 500
    assert r.json == {"error": "Failed to create rote"}


def test_rotes_listed_newest_first(client):
    client.post("/api/rotes", json=_rote(name="First"))
    client.post("/api/rotes", json=_rote(name="Second"))
    client.post("/api/rotes", json=_rote(name="Third"))

    names = [r["name"] for r in client.get("/api/rotes").json]
    assert names == ["Third", "Second", "First"]


def test_rotes_filter_by_tradition(client):
    client.post("/api/rotes", json=_rote(name="Hermetic", tradition="Order of Hermes"))
    client.post("/api/rotes", json=_rote(name="Verbena Rite", tradition="Verbena"))

    r = client.get("/api/rotes?tradition=Verbena")
    assert [x["name"] for x in r.json] == ["Verbena Rite"]


def test_rotes_filter_by_sphere_includes_technocracy_alias(client):
    client.post("/api/rotes", json=_rote(name="Data Link", spheres={"Data": 2}))
    client.post("/api/rotes", json=_rote(name="Far Sight", spheres={"Correspondence": 3}))
    client.post("/api/rotes", json=_rote(name="Fireball", spheres={"Forces": 3}))
    client.post("/api/rotes", json=_rote(name="Zero Dot", spheres={"Correspondence": 0, "Forces": 1}))

    names = {x["name"] for x in client.get("/api/rotes?sphere=Correspondence").json}
    assert names == {"Data Link", "Far Sight"}


def test_rote_detail_and_404(client):
    created = client.post("/api/rotes", json=_rote()).json
    r = client.get(f"/api/rotes/{created['id']}")
    assert r.status_code == 200
    assert r.json["name"] == created["name"]

    r = client.get("/api/rotes/9999")
    assert r.status_code == 404
    assert r.json == {"error": "Rote not found"}


def test_rote_update(client):
    created = client.post("/api/rotes", json=_rote()).json
    r = client.put(f"/api/rotes/{created['id']}", json=_rote(name="Renamed Ward", level="Adept"))
    assert r.status_code == 200
    assert r.json["name"] == "Renamed Ward"
    assert r.json["level"] == "Adept"


def test_rote_delete(app, client):
    created = client.post("/api/rotes", json=_rote()).json
    r = client.delete(f"/api/rotes/{created['id']}")
    assert r.status_code == 200
    assert r.json == {"success": True}

    with session_scope(app) as s:
        assert s.query(Rote).count() == 0

    assert client.delete(f"/api/rotes/{created['id']}").status_code == 404


def test_rote_level_zero_counts_as_missing(client):
    r = client.post("/api/rotes", json=_rote(level=0))
    assert r.status_code == 400
    assert r.json == {"error": "Missing required fields"}


def test_rote_id_beyond_64_bits_is_404(client):
    huge = 10**20
    assert client.get(f"/api/rotes/{huge}").status_code == 404
    assert client.put(f"/api/rotes/{huge}", json=_rote()).status_code == 404
    r = client.delete(f"/api/rotes/{huge}")
    assert r.status_code == 404
    assert r.json == {"error": "Rote not found"}
