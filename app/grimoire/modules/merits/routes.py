from __future__ import annotations

from flask import Blueprint, jsonify

from app.grimoire.db import db_session
from app.grimoire.errors import ValidationError, api_errors
from app.grimoire.modules.merits.models import Merit
from app.grimoire.modules.merits.service import create_merit, list_merits, update_merit, validate_merit_payload
from app.grimoire.utils import get_or_404, json_body

bp = Blueprint("merits", __name__)


@bp.get("/merits")
@api_errors("Failed to fetch merits")
def merits_list():
    return jsonify([m.to_dict() for m in list_merits(db_session())])


@bp.post("/merits")
@api_errors("Failed to create merit")
def merits_create():
    s = db_session()
    payload = json_body()

    errors = validate_merit_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    merit = create_merit(s, payload)
    s.commit()
    return jsonify(merit.to_dict()), 201


@bp.get("/merits/<int:merit_id>")
@api_errors("Failed to fetch merit")
def merit_detail(merit_id: int):
    merit = get_or_404(db_session(), Merit, merit_id, "Merit not found")
    return jsonify(merit.to_dict())


@bp.put("/merits/<int:merit_id>")
@api_errors("Failed to update merit")
def merit_update(merit_id: int):
    s = db_session()
    merit = get_or_404(s, Merit, merit_id, "Merit not found")
    payload = json_body()

    errors = validate_merit_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    update_merit(s, merit, payload)
    s.commit()
    return jsonify(merit.to_dict())


@bp.delete("/merits/<int:merit_id>")
@api_errors("Failed to delete merit")
def merit_delete(merit_id: int):
    s = db_session()
    merit = get_or_404(s, Merit, merit_id, "Merit not found")
    s.delete(merit)
    s.commit()
    return jsonify({"success": True})
