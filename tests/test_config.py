import pytest

from app.grimoire.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_SECRET_KEY, check_production_config, load_config


def _prod(**overrides):
    config = {
        "ENV": "production",
        "DATABASE_URL": "postgresql://u:p@db/grimoire",
        "SECRET_KEY": "s3cret",
        "ADMIN_PASSWORD": "a-strong-password",
    }
    config.update(overrides)
    return config


def test_production_config_ok():
    check_production_config(_prod())


@pytest.mark.parametrize(
    "overrides",
    [
        {"DATABASE_URL": ""},
        {"DATABASE_URL": "sqlite:///grimoire.db"},
        {"SECRET_KEY": DEFAULT_SECRET_KEY},
        {"ADMIN_PASSWORD": DEFAULT_ADMIN_PASSWORD},
    ],
)
def test_production_config_rejects_unsafe_values(overrides):
    with pytest.raises(RuntimeError):
        check_production_config(_prod(**overrides))


def test_non_production_allows_defaults():
    check_production_config({"ENV": "development", "DATABASE_URL": "sqlite:///x.db", "SECRET_KEY": DEFAULT_SECRET_KEY})


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("ENV", "Production")
    monkeypatch.setenv("ADMIN_PASSWORD", " hunter2 ")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    config = load_config()
    assert config["ENV"] == "production"
    assert config["ADMIN_PASSWORD"] == "hunter2"
    assert config["DATABASE_URL"] == "sqlite:///grimoire.db"
    assert config["SESSION_COOKIE_SECURE"] is True


def test_load_config_default_admin_password(monkeypatch):
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    config = load_config()
    assert config["ADMIN_PASSWORD"] == DEFAULT_ADMIN_PASSWORD
    assert config["SESSION_COOKIE_SECURE"] is False
