from __future__ import annotations

from flask import Blueprint, jsonify

from app.grimoire.audit import admin_action
from app.grimoire.db import db_session
from app.grimoire.errors import api_errors
from app.grimoire.modules.site_settings.service import get_settings_row, settings_payload, upsert_settings
from app.grimoire.security import require_admin_password
from app.grimoire.utils import json_body

bp = Blueprint("site_settings", __name__)


@bp.get("/site-settings")
@api_errors("Failed to fetch site settings")
def site_settings_get():
    return jsonify(settings_payload(get_settings_row(db_session())))


@bp.put("/site-settings")
@api_errors("Failed to update site settings")
def site_settings_put():
    payload = json_body()
    require_admin_password(payload, "site_settings.update")

    s = db_session()
    row, changed = upsert_settings(s, payload)
    admin_action(s, "site_settings.update", entity_type="SiteSettings", entity_id=row.key, metadata={"fields": changed})
    s.commit()
    return jsonify(settings_payload(row))
