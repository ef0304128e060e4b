from __future__ import annotations

from flask import Blueprint, jsonify

from app.grimoire.audit import admin_action
from app.grimoire.db import db_session
from app.grimoire.errors import api_errors
from app.grimoire.modules.character_creation.service import FIELDS, get_content, update_content
from app.grimoire.modules.site_settings.service import keyed_payload
from app.grimoire.security import require_admin_password
from app.grimoire.utils import json_body

bp = Blueprint("character_creation", __name__)


@bp.get("/character-creation-content")
@api_errors("Failed to fetch content")
def character_creation_get():
    return jsonify(get_content(db_session()))


@bp.put("/character-creation-content")
@api_errors("Failed to update content")
def character_creation_put():
    payload = json_body()
    require_admin_password(payload, "character_creation_content.update")

    s = db_session()
    row, changed = update_content(s, payload)
    admin_action(
        s,
        "character_creation_content.update",
        entity_type="CharacterCreationContent",
        entity_id=row.key,
        metadata={"fields": changed},
    )
    s.commit()
    return jsonify(keyed_payload(row, FIELDS))
