from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from app.grimoire.db import db_session
from app.grimoire.errors import ValidationError, api_errors
from app.grimoire.modules.rotes.models import Rote
from app.grimoire.modules.rotes.service import create_rote, list_rotes, update_rote, validate_rote_payload
from app.grimoire.utils import get_or_404, json_body

bp = Blueprint("rotes", __name__)


@bp.get("/rotes")
@api_errors("Failed to fetch rotes")
def rotes_list():
    s = db_session()
    tradition = (request.args.get("tradition") or "").strip()
    sphere = (request.args.get("sphere") or "").strip()
    rotes = list_rotes(s, tradition=tradition or None, sphere=sphere or None)
    return jsonify([r.to_dict() for r in rotes])


@bp.post("/rotes")
@api_errors("Failed to create rote")
def rotes_create():
    s = db_session()
    payload = json_body()

    errors = validate_rote_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    rote = create_rote(s, payload)
    s.commit()
    current_app.logger.info("Rote created id=%s name=%s", rote.id, rote.name)
    return jsonify(rote.to_dict()), 201


@bp.get("/rotes/<int:rote_id>")
@api_errors("Failed to fetch rote")
def rote_detail(rote_id: int):
    rote = get_or_404(db_session(), Rote, rote_id, "Rote not found")
    return jsonify(rote.to_dict())


@bp.put("/rotes/<int:rote_id>")
@api_errors("Failed to update rote")
def rote_update(rote_id: int):
    s = db_session()
    rote = get_or_404(s, Rote, rote_id, "Rote not found")
    payload = json_body()

    errors = validate_rote_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    update_rote(s, rote, payload)
    s.commit()
    return jsonify(rote.to_dict())


@bp.delete("/rotes/<int:rote_id>")
@api_errors("Failed to delete rote")
def rote_delete(rote_id: int):
    s = db_session()
    rote = get_or_404(s, Rote, rote_id, "Rote not found")
    s.delete(rote)
    s.commit()
    current_app.logger.info("Rote deleted id=%s", rote_id)
    return jsonify({"success": True})
