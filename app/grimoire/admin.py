"""
Password-gated admin actions.

Every endpoint takes ``{"password": ...}`` in the JSON body and compares it with
the configured ADMIN_PASSWORD. Outcomes, including rejected passwords, are
written to the audit trail.
"""
from __future__ import annotations

from flask import Blueprint, jsonify

from app.grimoire.audit import admin_action, admin_denied
from app.grimoire.db import db_session
from app.grimoire.errors import api_errors
from app.grimoire.modules.rotes.service import delete_all_rotes, seed_sample_rotes
from app.grimoire.security import check_admin_password, require_admin_password
from app.grimoire.utils import json_body

bp = Blueprint("admin", __name__)


@bp.post("/auth")
@api_errors("Authentication failed")
def admin_auth():
    payload = json_body()
    if check_admin_password(payload.get("password")):
        return jsonify({"authenticated": True})
    admin_denied(db_session(), "admin.auth")
    return jsonify({"authenticated": False, "error": "Invalid password"}), 401


@bp.delete("/delete-all")
@api_errors("Failed to delete rotes")
def admin_delete_all():
    require_admin_password(json_body(), "admin.delete_all")

    s = db_session()
    deleted = delete_all_rotes(s)
    admin_action(s, "admin.delete_all", entity_type="Rote", metadata={"deleted_count": deleted})
    s.commit()
    return jsonify({"success": True, "deletedCount": deleted})


@bp.post("/seed")
@api_errors("Failed to seed database")
def admin_seed():
    require_admin_password(json_body(), "admin.seed")

    s = db_session()
    created = seed_sample_rotes(s)
    admin_action(s, "admin.seed", entity_type="Rote", metadata={"count": len(created)})
    s.commit()
    return jsonify({"success": True, "count": len(created)})
