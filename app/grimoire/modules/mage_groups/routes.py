from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from app.grimoire.db import db_session
from app.grimoire.errors import Conflict, ValidationError, api_errors
from app.grimoire.modules.mage_groups.models import MageGroup
from app.grimoire.modules.mage_groups.service import (
    create_mage_group,
    list_mage_groups,
    update_mage_group,
    validate_mage_group_payload,
)
from app.grimoire.utils import get_or_404, json_body, parse_int

bp = Blueprint("mage_groups", __name__)


def _group_id(value) -> int:
    if value in (None, ""):
        raise ValidationError("ID required")
    try:
        return parse_int(value)
    except (TypeError, ValueError):
        raise ValidationError("ID must be an integer")


@bp.get("/mage-groups")
@api_errors("Failed to fetch mage groups")
def mage_groups_list():
    groups = list_mage_groups(
        db_session(),
        published_only=request.args.get("published") == "true",
        category=(request.args.get("category") or "").strip() or None,
    )
    return jsonify([group.to_dict() for group in groups])


@bp.post("/mage-groups")
@api_errors("Failed to create mage group")
def mage_groups_create():
    s = db_session()
    payload = json_body()

    errors = validate_mage_group_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    try:
        group = create_mage_group(s, payload)
        s.commit()
    except IntegrityError:
        s.rollback()
        raise Conflict("A mage group with this slug already exists")
    return jsonify(group.to_dict()), 201


@bp.put("/mage-groups")
@api_errors("Failed to update mage group")
def mage_groups_update():
    s = db_session()
    payload = json_body()
    group = get_or_404(s, MageGroup, _group_id(payload.get("id")), "Mage group not found")

    errors = validate_mage_group_payload(payload, partial=True)
    if errors:
        raise ValidationError(errors[0])

    try:
        update_mage_group(s, group, payload)
        s.commit()
    except IntegrityError:
        s.rollback()
        raise Conflict("A mage group with this slug already exists")
    return jsonify(group.to_dict())


@bp.delete("/mage-groups")
@api_errors("Failed to delete mage group")
def mage_groups_delete():
    s = db_session()
    group_id = _group_id(request.args.get("id"))
    group = get_or_404(s, MageGroup, group_id, "Mage group not found")
    s.delete(group)
    s.commit()
    current_app.logger.info("Mage group deleted id=%s", group_id)
    return jsonify({"success": True})
