from __future__ import annotations

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import IntegrityError

from app.grimoire.db import db_session
from app.grimoire.errors import Conflict, ValidationError, api_errors
from app.grimoire.modules.backgrounds.service import (
    create_background,
    list_backgrounds,
    validate_background_payload,
)
from app.grimoire.utils import json_body

bp = Blueprint("backgrounds", __name__)


@bp.get("/backgrounds")
@api_errors("Failed to fetch backgrounds")
def backgrounds_list():
    subtype = (request.args.get("subtype") or "").strip()
    backgrounds = list_backgrounds(db_session(), subtype=subtype or None)
    return jsonify([b.to_dict() for b in backgrounds])


@bp.post("/backgrounds")
@api_errors("Failed to create background")
def backgrounds_create():
    s = db_session()
    payload = json_body()

    errors = validate_background_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    try:
        background = create_background(s, payload)
        s.commit()
    except IntegrityError:
        s.rollback()
        raise Conflict("Background already exists")
    return jsonify(background.to_dict()), 201
