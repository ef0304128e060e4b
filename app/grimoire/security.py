import hmac

from flask import current_app

from app.grimoire.audit import admin_denied
from app.grimoire.db import db_session
from app.grimoire.errors import Unauthorized


def check_admin_password(candidate: object) -> bool:
    """Constant-time comparison of a client-supplied password with the admin secret."""
    expected = str(current_app.config.get("ADMIN_PASSWORD") or "")
    if not expected or not isinstance(candidate, str):
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def require_admin_password(payload: dict, action: str) -> None:
    """Raise 401 (after auditing the attempt) unless payload carries the admin password."""
    if not check_admin_password(payload.get("password")):
        admin_denied(db_session(), action)
        raise Unauthorized("Unauthorized")
