from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.grimoire.utils import clean_str, missing_fields, parse_bool

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.grimoire.modules.resources.models import Resource


REQUIRED_FIELDS = ("name", "type", "description")


def validate_resource_payload(payload: dict) -> list[str]:
    """Returns list of errors."""
    if missing_fields(payload, *REQUIRED_FIELDS):
        return ["Missing required fields"]
    return []


def list_resources(s: "Session") -> list["Resource"]:
    """Featured first, then by type, then by name."""
    from app.grimoire.modules.resources.models import Resource

    return (
        s.query(Resource)
        .order_by(Resource.featured.desc(), Resource.type.asc(), Resource.name.asc(), Resource.id.asc())
        .all()
    )


def _apply(resource: "Resource", payload: dict) -> None:
    resource.name = str(payload["name"]).strip()
    resource.type = str(payload["type"]).strip()
    resource.category = clean_str(payload.get("category"))
    resource.description = str(payload["description"]).strip()
    resource.url = clean_str(payload.get("url"))
    resource.author = clean_str(payload.get("author"))
    resource.image_url = clean_str(payload.get("imageUrl"))
    resource.featured = parse_bool(payload.get("featured"))


def create_resource(s: "Session", payload: dict) -> "Resource":
    from app.grimoire.modules.resources.models import Resource

    now = datetime.utcnow()
    resource = Resource(created_at=now, updated_at=now)
    _apply(resource, payload)
    s.add(resource)
    s.flush()
    return resource


def update_resource(s: "Session", resource: "Resource", payload: dict) -> "Resource":
    _apply(resource, payload)
    resource.updated_at = datetime.utcnow()
    s.flush()
    return resource
