from __future__ import annotations

from typing import TYPE_CHECKING

from app.grimoire.utils import clean_str, missing_fields

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.grimoire.modules.backgrounds.models import Background


REQUIRED_FIELDS = ("name", "subtype", "cost", "description")
VALID_SUBTYPES = ("general", "mage")


def validate_background_payload(payload: dict) -> list[str]:
    """Returns list of errors."""
    errors = []
    if missing_fields(payload, *REQUIRED_FIELDS):
        errors.append("Missing required fields")
        return errors
    subtype = str(payload.get("subtype")).strip()
    if subtype not in VALID_SUBTYPES:
        errors.append(f"Invalid subtype. Must be one of: {', '.join(VALID_SUBTYPES)}")
    return errors


def list_backgrounds(s: "Session", subtype: str | None = None) -> list["Background"]:
    from app.grimoire.modules.backgrounds.models import Background

    q = s.query(Background)
    if subtype:
        q = q.filter(Background.subtype == subtype)
    return q.order_by(Background.name.asc()).all()


def get_background_by_name(s: "Session", name: str) -> "Background | None":
    from app.grimoire.modules.backgrounds.models import Background

    return s.query(Background).filter(Background.name == name.strip()).one_or_none()


def create_background(s: "Session", payload: dict) -> "Background":
    """Flushes immediately so a duplicate name raises IntegrityError here."""
    from app.grimoire.modules.backgrounds.models import Background

    background = Background(
        name=str(payload["name"]).strip(),
        category=clean_str(payload.get("category")),
        subtype=str(payload["subtype"]).strip(),
        cost=str(payload["cost"]).strip(),
        description=str(payload["description"]).strip(),
        page_ref=clean_str(payload.get("pageRef")),
    )
    s.add(background)
    s.flush()
    return background
