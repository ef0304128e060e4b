import os
from dataclasses import dataclass

DEFAULT_SECRET_KEY = "change-me"
DEFAULT_ADMIN_PASSWORD = "TruthUntilParadox"


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    database_url: str
    admin_password: str
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    return Settings(
        secret_key=_getenv("SECRET_KEY", DEFAULT_SECRET_KEY),
        env=_getenv("ENV", "development").lower(),
        database_url=_getenv("DATABASE_URL", "sqlite:///grimoire.db"),
        admin_password=_getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )


def is_production(env: str | None) -> bool:
    return (env or "").strip().lower() in ("prod", "production")


def load_config() -> dict:
    s = load_settings()
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "ADMIN_PASSWORD": s.admin_password,
        "LOG_LEVEL": s.log_level,
        # session cookie defaults
        "SESSION_COOKIE_HTTPONLY": True,
        "SESSION_COOKIE_SAMESITE": "Lax",
        "SESSION_COOKIE_SECURE": is_production(s.env),
        # JSON bodies only; nothing here accepts uploads
        "MAX_CONTENT_LENGTH": 1 * 1024 * 1024,
    }


def check_production_config(config: dict) -> None:
    """Fail fast when a production deploy is missing required secrets."""
    if not is_production(config.get("ENV")):
        return
    db_url = str(config.get("DATABASE_URL") or "").strip()
    if not db_url:
        raise RuntimeError("DATABASE_URL is required in production.")
    if db_url.startswith("sqlite"):
        raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")
    if str(config.get("SECRET_KEY") or "") in ("", DEFAULT_SECRET_KEY):
        raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")
    if str(config.get("ADMIN_PASSWORD") or "") in ("", DEFAULT_ADMIN_PASSWORD):
        raise RuntimeError("ADMIN_PASSWORD must be set in production (not default).")
