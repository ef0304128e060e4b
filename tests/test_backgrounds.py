import pytest

from app.grimoire import create_app
from app.grimoire.models import Base
from scripts import import_backgrounds
from scripts.init_db import create_tables


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("ADMIN_PASSWORD", "test-admin")

    app = create_app()
    Base.metadata.create_all(bind=app.extensions["sqlalchemy_engine"])
    return app.test_client()


def _background(**overrides):
    payload = {
        "name": "Node",
        "subtype": "mage",
        "cost": "Variable",
        "description": "A place of power.",
        "pageRef": "M20 p. 319",
    }
    payload.update(overrides)
    return payload


def test_background_create(client):
    r = client.post("/api/backgrounds", json=_background())
    assert r.status_code == 201
    assert r.json["name"] == "Node"
    assert r.json["subtype"] == "mage"
    assert r.json["pageRef"] == "M20 p. 319"


def test_background_duplicate_name_is_409(client):
    assert client.post("/api/backgrounds", json=_background()).status_code == 201
    r = client.post("/api/backgrounds", json=_background(description="Another one"))
    assert r.status_code == 409
    assert r.json == {"error": "Background already exists"}


def test_background_missing_fields_is_400(client):
    r = client.post("/api/backgrounds", json=_background(cost=""))
    assert r.status_code == 400
    assert r.json == {"error": "Missing required fields"}


def test_background_invalid_subtype_is_400(client):
    r = client.post("/api/backgrounds", json=_background(subtype="vampire"))
    assert r.status_code == 400
    assert "Invalid subtype" in r.json["error"]


def test_backgrounds_sorted_by_name_and_filtered_by_subtype(client):
    client.post("/api/backgrounds", json=_background(name="Resources", subtype="general"))
    client.post("/api/backgrounds", json=_background(name="Avatar", subtype="mage"))
    client.post("/api/backgrounds", json=_background(name="Allies", subtype="general"))

    names = [b["name"] for b in client.get("/api/backgrounds").json]
    assert names == ["Allies", "Avatar", "Resources"]

    general = [b["name"] for b in client.get("/api/backgrounds?subtype=general").json]
    assert general == ["Allies", "Resources"]


def test_background_import_is_idempotent(tmp_path):
    db_url = f"sqlite:///{tmp_path/'import.db'}"
    create_tables(db_url)

    first = import_backgrounds.run_import(database_url=db_url)
    assert first == {"created": len(import_backgrounds.BACKGROUNDS), "skipped": 0, "errors": 0}

    second = import_backgrounds.run_import(database_url=db_url)
    assert second == {"created": 0, "skipped": len(import_backgrounds.BACKGROUNDS), "errors": 0}


def test_background_import_dry_run_writes_nothing(tmp_path):
    db_url = f"sqlite:///{tmp_path/'import.db'}"
    create_tables(db_url)

    import_backgrounds.run_import(database_url=db_url, dry_run=True)
    counts = import_backgrounds.run_import(database_url=db_url)
    assert counts["created"] == len(import_backgrounds.BACKGROUNDS)


def test_background_import_skips_existing_names(client, tmp_path):
    client.post("/api/backgrounds", json=_background(name="Avatar"))

    counts = import_backgrounds.run_import(database_url=f"sqlite:///{tmp_path/'test.db'}")
    assert counts["skipped"] == 1
    assert counts["created"] == len(import_backgrounds.BACKGROUNDS) - 1

    subtypes = {b["subtype"] for b in client.get("/api/backgrounds").json}
    assert subtypes == {"general", "mage"}
