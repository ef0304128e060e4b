from __future__ import annotations

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import IntegrityError

from app.grimoire.db import db_session
from app.grimoire.errors import ValidationError, api_errors
from app.grimoire.models import User
from app.grimoire.modules.characters.service import (
    assign_rote,
    create_character,
    get_owned_character,
    list_characters,
    remove_rote,
    update_character,
    validate_character_payload,
)
from app.grimoire.rbac import current_user, login_required
from app.grimoire.utils import json_body, parse_int

bp = Blueprint("characters", __name__)


def _user() -> User:
    u = current_user()
    if not u:
        raise RuntimeError("No current user")
    return u


def _rote_id(value) -> int:
    if value in (None, ""):
        raise ValidationError("Rote ID is required")
    try:
        return parse_int(value)
    except (TypeError, ValueError):
        raise ValidationError("Rote ID must be an integer")


@bp.get("/characters")
@login_required
@api_errors("Failed to fetch characters")
def characters_list():
    characters = list_characters(db_session(), _user())
    return jsonify([c.to_dict() for c in characters])


@bp.post("/characters")
@login_required
@api_errors("Failed to create character")
def characters_create():
    s = db_session()
    payload = json_body()

    errors = validate_character_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    character = create_character(s, payload, _user())
    s.commit()
    return jsonify(character.to_dict()), 201


@bp.get("/characters/<int:character_id>")
@login_required
@api_errors("Failed to fetch character")
def character_detail(character_id: int):
    character = get_owned_character(db_session(), _user(), character_id)
    return jsonify(character.to_dict())


@bp.put("/characters/<int:character_id>")
@login_required
@api_errors("Failed to update character")
def character_update(character_id: int):
    s = db_session()
    character = get_owned_character(s, _user(), character_id)
    payload = json_body()

    errors = validate_character_payload(payload, partial=True)
    if errors:
        raise ValidationError(errors[0])

    update_character(s, character, payload)
    s.commit()
    return jsonify(character.to_dict())


@bp.delete("/characters/<int:character_id>")
@login_required
@api_errors("Failed to delete character")
def character_delete(character_id: int):
    s = db_session()
    character = get_owned_character(s, _user(), character_id)
    s.delete(character)
    s.commit()
    return jsonify({"success": True})


@bp.post("/characters/<int:character_id>/rotes")
@login_required
@api_errors("Failed to assign rote")
def character_rote_assign(character_id: int):
    s = db_session()
    character = get_owned_character(s, _user(), character_id)
    payload = json_body()
    rote_id = _rote_id(payload.get("roteId"))

    try:
        assignment = assign_rote(
            s,
            character,
            rote_id,
            notes=payload.get("notes"),
            specialty=payload.get("specialty") or False,
        )
        s.commit()
    except IntegrityError:
        s.rollback()
        raise ValidationError("Rote already assigned to this character")
    return jsonify(assignment.to_dict()), 201


@bp.delete("/characters/<int:character_id>/rotes")
@login_required
@api_errors("Failed to remove rote")
def character_rote_remove(character_id: int):
    s = db_session()
    character = get_owned_character(s, _user(), character_id)
    rote_id = _rote_id(request.args.get("roteId"))
    remove_rote(s, character, rote_id)
    s.commit()
    return jsonify({"success": True})
