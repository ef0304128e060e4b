from __future__ import annotations

from flask import Blueprint, jsonify

from app.grimoire.audit import admin_action
from app.grimoire.db import db_session
from app.grimoire.errors import api_errors
from app.grimoire.modules.guide_content.service import FIELDS, get_guide, update_guide
from app.grimoire.modules.site_settings.service import keyed_payload
from app.grimoire.security import require_admin_password
from app.grimoire.utils import json_body

bp = Blueprint("guide_content", __name__)


@bp.get("/guide-expanded-content")
@api_errors("Failed to fetch content")
def guide_content_get():
    return jsonify(get_guide(db_session()))


@bp.put("/guide-expanded-content")
@api_errors("Failed to update content")
def guide_content_put():
    payload = json_body()
    require_admin_password(payload, "guide_content.update")

    s = db_session()
    row, changed = update_guide(s, payload)
    admin_action(s, "guide_content.update", entity_type="GuideExpandedContent", entity_id=row.key, metadata={"fields": changed})
    s.commit()
    return jsonify(keyed_payload(row, FIELDS))
