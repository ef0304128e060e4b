from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from app.grimoire.utils import clean_str, missing_fields, parse_bool, parse_int

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.grimoire.modules.mage_groups.models import MageGroup


REQUIRED_FIELDS = ("name", "category", "description")
# Optional long-form sections; blank is stored as NULL.
TEXT_FIELDS = ("philosophy", "practices", "organization")


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def validate_mage_group_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Returns list of errors. ``partial`` only checks the fields present (updates)."""
    errors = []
    required = [n for n in REQUIRED_FIELDS if n in payload] if partial else REQUIRED_FIELDS
    if missing_fields(payload, *required):
        errors.append("Missing required fields")
        return errors
    if not partial and not slugify(str(payload.get("slug") or payload["name"])):
        errors.append("Name must contain letters or digits")
    try:
        parse_int(payload.get("sortOrder"))
    except (TypeError, ValueError):
        errors.append("sortOrder must be an integer")
    return errors


def list_mage_groups(
    s: "Session", *, published_only: bool = False, category: str | None = None
) -> list["MageGroup"]:
    from app.grimoire.modules.mage_groups.models import MageGroup

    q = s.query(MageGroup)
    if published_only:
        q = q.filter(MageGroup.published.is_(True))
    if category:
        q = q.filter(MageGroup.category == category)
    return q.order_by(
        MageGroup.category.asc(), MageGroup.sort_order.asc(), MageGroup.name.asc(), MageGroup.id.asc()
    ).all()


def _set_images(group: "MageGroup", payload: dict) -> None:
    if "headerImage" in payload:
        group.logo_image = clean_str(payload.get("headerImage"))
        group.representative_image = group.logo_image
    if "sidebarImage" in payload:
        group.symbol_image = clean_str(payload.get("sidebarImage"))


def create_mage_group(s: "Session", payload: dict) -> "MageGroup":
    """Flushes immediately so a duplicate slug raises IntegrityError here."""
    from app.grimoire.modules.mage_groups.models import MageGroup

    now = datetime.utcnow()
    name = str(payload["name"]).strip()
    group = MageGroup(
        name=name,
        slug=slugify(str(payload.get("slug") or "") or name),
        category=str(payload["category"]).strip(),
        description=str(payload["description"]).strip(),
        published=parse_bool(payload.get("published")),
        sort_order=parse_int(payload.get("sortOrder")) or 0,
        created_at=now,
        updated_at=now,
    )
    for field in TEXT_FIELDS:
        setattr(group, field, clean_str(payload.get(field)))
    _set_images(group, payload)
    s.add(group)
    s.flush()
    return group


def update_mage_group(s: "Session", group: "MageGroup", payload: dict) -> "MageGroup":
    """Only fields present in payload change."""
    for field in REQUIRED_FIELDS:
        if field in payload:
            setattr(group, field, str(payload[field]).strip())
    slug = slugify(str(payload.get("slug") or ""))
    if slug:
        group.slug = slug
    for field in TEXT_FIELDS:
        if field in payload:
            setattr(group, field, clean_str(payload.get(field)))
    if "published" in payload:
        group.published = parse_bool(payload.get("published"))
    if "sortOrder" in payload:
        group.sort_order = parse_int(payload.get("sortOrder")) or 0
    _set_images(group, payload)
    group.updated_at = datetime.utcnow()
    s.flush()
    return group
