import pytest

from app.grimoire import create_app
from app.grimoire.db import session_scope
from app.grimoire.models import AuditEvent, Base, User


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


def _signup(client, email="mage@example.com", password="paradox1", name="Mage"):
    return client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})


def test_signup_creates_user_and_signs_in(app, client):
    r = _signup(client, email="Mage@Example.com ")
    assert r.status_code == 201
    user = r.json["user"]
    assert user["email"] == "mage@example.com"
    assert "passwordHash" not in user
    assert "password_hash" not in user

    r = client.get("/api/auth/session")
    assert r.json["user"]["email"] == "mage@example.com"

    with session_scope(app) as s:
        stored = s.query(User).one()
        assert stored.password_hash != "paradox1"


def test_signup_requires_email_and_password(client):
    r = client.post("/api/auth/signup", json={"email": "mage@example.com"})
    assert r.status_code == 400
    assert r.json == {"error": "Email and password are required"}


def test_signup_rejects_short_password(client):
    r = _signup(client, password="abc")
    assert r.status_code == 400


def test_signup_rejects_invalid_email(client):
    r = _signup(client, email="not-an-email")
    assert r.status_code == 400


def test_signup_duplicate_email_is_409(client):
    _signup(client)
    client.post("/api/auth/signout")
    r = _signup(client, email="MAGE@example.com")
    assert r.status_code == 409
    assert r.json == {"error": "An account with this email already exists"}


def test_signin_and_signout(client):
    _signup(client)
    client.post("/api/auth/signout")
    assert client.get("/api/auth/session").json == {"user": None}

    r = client.post("/api/auth/signin", json={"email": "mage@example.com", "password": "paradox1"})
    assert r.status_code == 200
    assert r.json["user"]["email"] == "mage@example.com"
    assert client.get("/api/auth/session").json["user"]["email"] == "mage@example.com"

    r = client.post("/api/auth/signout")
    assert r.json == {"success": True}
    assert client.get("/api/auth/session").json == {"user": None}


def test_signin_wrong_password_is_401_and_audited(app, client):
    _signup(client)
    client.post("/api/auth/signout")

    r = client.post("/api/auth/signin", json={"email": "mage@example.com", "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json == {"error": "Invalid credentials"}

    with session_scope(app) as s:
        actions = [e.action for e in s.query(AuditEvent).all()]
    assert "auth.signin_failed" in actions


def test_signin_unknown_email_is_401(client):
    r = client.post("/api/auth/signin", json={"email": "nobody@example.com", "password": "whatever"})
    assert r.status_code == 401


def test_signin_rate_limited_after_repeated_attempts(client):
    for _ in range(5):
        r = client.post("/api/auth/signin", json={"email": "nobody@example.com", "password": "whatever"})
        assert r.status_code == 401

    r = client.post("/api/auth/signin", json={"email": "nobody@example.com", "password": "whatever"})
    assert r.status_code == 429


def test_session_for_deactivated_user_is_cleared(app, client):
    _signup(client)
    with session_scope(app) as s:
        s.query(User).one().is_active = False

    assert client.get("/api/auth/session").json == {"user": None}
