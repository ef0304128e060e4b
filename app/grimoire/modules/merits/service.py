from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.grimoire.utils import clean_str, missing_fields, parse_int

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.grimoire.modules.merits.models import Merit


REQUIRED_FIELDS = ("name", "category", "type", "description")


def validate_merit_payload(payload: dict) -> list[str]:
    """Returns list of errors. ``cost`` may legitimately be 0."""
    errors = []
    if missing_fields(payload, *REQUIRED_FIELDS) or payload.get("cost") in (None, ""):
        errors.append("Missing required fields")
        return errors
    try:
        parse_int(payload.get("cost"))
    except (TypeError, ValueError):
        errors.append("cost must be an integer")
    return errors


def list_merits(s: "Session") -> list["Merit"]:
    from app.grimoire.modules.merits.models import Merit

    return s.query(Merit).order_by(Merit.category.asc(), Merit.type.asc(), Merit.name.asc()).all()


def _apply(merit: "Merit", payload: dict) -> None:
    merit.name = str(payload["name"]).strip()
    merit.category = str(payload["category"]).strip()
    merit.type = str(payload["type"]).strip()
    merit.subtype = clean_str(payload.get("subtype"))
    merit.cost = parse_int(payload["cost"])
    merit.description = str(payload["description"]).strip()
    merit.page_ref = clean_str(payload.get("pageRef"))


def create_merit(s: "Session", payload: dict) -> "Merit":
    from app.grimoire.modules.merits.models import Merit

    now = datetime.utcnow()
    merit = Merit(created_at=now, updated_at=now)
    _apply(merit, payload)
    s.add(merit)
    s.flush()
    return merit


def update_merit(s: "Session", merit: "Merit", payload: dict) -> "Merit":
    _apply(merit, payload)
    merit.updated_at = datetime.utcnow()
    s.flush()
    return merit
