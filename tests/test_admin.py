import json

import pytest

from app.grimoire import create_app
from app.grimoire.constants import SAMPLE_ROTES
from app.grimoire.db import session_scope
from app.grimoire.models import AuditEvent, Base


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


def _actions(app):
    with session_scope(app) as s:
        return [e.action for e in s.query(AuditEvent).order_by(AuditEvent.id.asc()).all()]


def test_admin_auth_correct_password(client):
    r = client.post("/api/admin/auth", json={"password": "test-admin"})
    assert r.status_code == 200
    assert r.json == {"authenticated": True}


def test_admin_auth_wrong_password(app, client):
    r = client.post("/api/admin/auth", json={"password": "nope"})
    assert r.status_code == 401
    assert r.json == {"authenticated": False, "error": "Invalid password"}
    assert _actions(app) == ["admin.auth_denied"]


def test_admin_auth_missing_password(client):
    r = client.post("/api/admin/auth", json={})
    assert r.status_code == 401
    assert r.json["authenticated"] is False


def test_admin_seed_inserts_sample_rotes(app, client):
    r = client.post("/api/admin/seed", json={"password": "test-admin"})
    assert r.status_code == 200
    assert r.json == {"success": True, "count": len(SAMPLE_ROTES)}

    rotes = client.get("/api/rotes").json
    assert len(rotes) == len(SAMPLE_ROTES)
    assert {r["name"] for r in rotes} == {sample["name"] for sample in SAMPLE_ROTES}
    assert _actions(app) == ["admin.seed"]


def test_admin_seed_twice_inserts_copies(client):
    client.post("/api/admin/seed", json={"password": "test-admin"})
    client.post("/api/admin/seed", json={"password": "test-admin"})
    assert len(client.get("/api/rotes").json) == 2 * len(SAMPLE_ROTES)


def test_admin_seed_wrong_password(app, client):
    r = client.post("/api/admin/seed", json={"password": "wrong"})
    assert r.status_code == 401
    assert r.json == {"error": "Unauthorized"}
    assert client.get("/api/rotes").json == []
    assert _actions(app) == ["admin.seed_denied"]


def test_admin_delete_all(app, client):
    client.post("/api/admin/seed", json={"password": "test-admin"})

    r = client.delete("/api/admin/delete-all", json={"password": "test-admin"})
    assert r.status_code == 200
    assert r.json == {"success": True, "deletedCount": len(SAMPLE_ROTES)}
    assert client.get("/api/rotes").json == []

    # nothing left to delete
    r = client.delete("/api/admin/delete-all", json={"password": "test-admin"})
    assert r.json == {"success": True, "deletedCount": 0}
    assert _actions(app) == ["admin.seed", "admin.delete_all", "admin.delete_all"]


def test_admin_delete_all_wrong_password_keeps_rotes(client):
    client.post("/api/admin/seed", json={"password": "test-admin"})

    r = client.delete("/api/admin/delete-all", json={"password": "wrong"})
    assert r.status_code == 401
    assert r.json == {"error": "Unauthorized"}
    assert len(client.get("/api/rotes").json) == len(SAMPLE_ROTES)


def test_admin_delete_all_records_count_in_audit_metadata(app, client):
    client.post("/api/admin/seed", json={"password": "test-admin"})
    client.delete("/api/admin/delete-all", json={"password": "test-admin"})

    with session_scope(app) as s:
        event = s.query(AuditEvent).filter(AuditEvent.action == "admin.delete_all").one()
        assert event.entity_type == "Rote"
        assert json.loads(event.metadata_json) == {"deleted_count": len(SAMPLE_ROTES)}
