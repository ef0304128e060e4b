from __future__ import annotations

import uuid
from collections import defaultdict
from datetime import datetime, timedelta

from flask import Blueprint, current_app, g, jsonify, request, session
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from app.grimoire.audit import record_event
from app.grimoire.db import db_session
from app.grimoire.errors import Conflict, TooManyRequests, Unauthorized, ValidationError, api_errors
from app.grimoire.models import User
from app.grimoire.rbac import current_user
from app.grimoire.utils import clean_str, json_body

bp = Blueprint("auth", __name__)
_SIGNIN_RATE_LIMIT = 5
_SIGNIN_RATE_WINDOW = 300  # seconds
MIN_PASSWORD_LENGTH = 6


def _attempts() -> dict[str, list[datetime]]:
    # per-app so separate app instances (tests, workers) don't share counters
    return current_app.extensions.setdefault("signin_attempts", defaultdict(list))


def _check_rate_limit(ip: str) -> bool:
    attempts = _attempts()
    cutoff = datetime.utcnow() - timedelta(seconds=_SIGNIN_RATE_WINDOW)
    attempts[ip] = [t for t in attempts[ip] if t > cutoff]
    return len(attempts[ip]) >= _SIGNIN_RATE_LIMIT


def _record_attempt(ip: str) -> None:
    _attempts()[ip].append(datetime.utcnow())


def load_current_user() -> None:
    """
    Loads g.current_user from the signed session cookie.
    Also assigns a per-request request_id (for audit/log correlation).
    """
    if not getattr(g, "request_id", None):
        g.request_id = uuid.uuid4().hex
    if request.path.startswith(("/health", "/healthz")):
        g.current_user = None
        return

    user_id = session.get("user_id")
    if not user_id:
        g.current_user = None
        return

    try:
        user = db_session().get(User, int(user_id))
    except Exception as e:
        current_app.logger.error("load_current_user DB error (clearing session): %s", e)
        user = None
    if not user or not user.is_active:
        session.pop("user_id", None)
        g.current_user = None
        return
    g.current_user = user


def _sign_in(user: User) -> None:
    session.clear()
    session["user_id"] = user.id
    session.permanent = True
    g.current_user = user


@bp.post("/signup")
@api_errors("Failed to create account")
def signup():
    s = db_session()
    payload = json_body()
    email = (clean_str(payload.get("email")) or "").lower()
    password = payload.get("password") or ""
    name = clean_str(payload.get("name"))

    if not email or not password:
        raise ValidationError("Email and password are required")
    if "@" not in email:
        raise ValidationError("Invalid email address")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if s.query(User).filter(User.email == email).one_or_none():
        raise Conflict("An account with this email already exists")

    user = User(email=email, name=name, password_hash=generate_password_hash(password), is_active=True)
    try:
        s.add(user)
        s.flush()
        record_event(s, actor=user, action="auth.signup", entity_type="User", entity_id=str(user.id))
        s.commit()
    except IntegrityError:
        # lost a race with a concurrent signup for the same email
        s.rollback()
        raise Conflict("An account with this email already exists")

    _sign_in(user)
    current_app.logger.info("User signed up id=%s", user.id)
    return jsonify({"user": user.to_dict()}), 201


@bp.post("/signin")
@api_errors("Sign-in failed")
def signin():
    s = db_session()
    payload = json_body()
    email = (clean_str(payload.get("email")) or "").lower()
    password = payload.get("password") or ""
    ip = request.remote_addr or "unknown"

    if _check_rate_limit(ip):
        raise TooManyRequests("Too many sign-in attempts. Please wait 5 minutes.")
    _record_attempt(ip)

    user = s.query(User).filter(User.email == email).one_or_none() if email else None
    if (
        not user
        or not user.is_active
        or not isinstance(password, str)
        or not check_password_hash(user.password_hash, password)
    ):
        record_event(
            s,
            actor=None,
            action="auth.signin_failed",
            entity_type="User",
            entity_id=email or None,
            reason="Invalid credentials",
        )
        s.commit()
        raise Unauthorized("Invalid credentials")

    _sign_in(user)
    _attempts()[ip].clear()
    record_event(s, actor=user, action="auth.signin", entity_type="User", entity_id=str(user.id))
    s.commit()
    return jsonify({"user": user.to_dict()})


@bp.post("/signout")
def signout():
    user = current_user()
    if user:
        s = db_session()
        record_event(s, actor=user, action="auth.signout", entity_type="User", entity_id=str(user.id))
        s.commit()
    session.clear()
    g.current_user = None
    return jsonify({"success": True})


@bp.get("/session")
def session_info():
    user = current_user()
    return jsonify({"user": user.to_dict() if user else None})
