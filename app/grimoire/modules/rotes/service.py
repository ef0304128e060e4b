from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from app.grimoire.constants import SAMPLE_ROTES, linked_spheres
from app.grimoire.utils import clean_str, missing_fields

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.grimoire.modules.rotes.models import Rote


REQUIRED_FIELDS = ("name", "tradition", "description", "spheres", "level")


def validate_rote_payload(payload: dict) -> list[str]:
    """Returns list of errors."""
    errors = []
    if missing_fields(payload, *REQUIRED_FIELDS):
        errors.append("Missing required fields")
        return errors
    spheres = payload.get("spheres")
    if not isinstance(spheres, dict):
        errors.append("spheres must be an object of sphere name to level")
        return errors
    for sphere, level in spheres.items():
        if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 5:
            errors.append(f"Invalid level for sphere {sphere}: must be 0-5")
    return errors


def list_rotes(s: "Session", *, tradition: str | None = None, sphere: str | None = None) -> list["Rote"]:
    from app.grimoire.modules.rotes.models import Rote

    q = s.query(Rote)
    if tradition:
        q = q.filter(Rote.tradition == tradition)
    rotes = q.order_by(Rote.created_at.desc(), Rote.id.desc()).all()
    if sphere:
        # JSON column; match in Python so it works on both sqlite and postgres
        names = linked_spheres(sphere)
        rotes = [r for r in rotes if any((r.spheres or {}).get(n, 0) >= 1 for n in names)]
    return rotes


def _apply(rote: "Rote", payload: dict) -> None:
    rote.name = str(payload["name"]).strip()
    rote.tradition = str(payload["tradition"]).strip()
    rote.description = str(payload["description"]).strip()
    rote.spheres = dict(payload["spheres"])
    rote.level = str(payload["level"]).strip()
    rote.page_ref = clean_str(payload.get("pageRef"))


def create_rote(s: "Session", payload: dict) -> "Rote":
    from app.grimoire.modules.rotes.models import Rote

    now = datetime.utcnow()
    rote = Rote(created_at=now, updated_at=now)
    _apply(rote, payload)
    s.add(rote)
    s.flush()
    return rote


def update_rote(s: "Session", rote: "Rote", payload: dict) -> "Rote":
    _apply(rote, payload)
    rote.updated_at = datetime.utcnow()
    s.flush()
    return rote


def delete_all_rotes(s: "Session") -> int:
    from app.grimoire.modules.rotes.models import Rote

    # ORM delete so character assignments cascade on backends without FK enforcement
    rotes = s.query(Rote).all()
    for rote in rotes:
        s.delete(rote)
    s.flush()
    return len(rotes)


def seed_sample_rotes(s: "Session", samples: Iterable[dict] = SAMPLE_ROTES) -> list["Rote"]:
    """Insert every sample rote. Not idempotent: each call adds a fresh copy."""
    created = []
    for sample in samples:
        created.append(
            create_rote(
                s,
                {
                    "name": sample["name"],
                    "tradition": sample["tradition"],
                    "description": sample["description"],
                    "spheres": sample["spheres"],
                    "level": sample["level"],
                    "pageRef": sample.get("page_ref"),
                },
            )
        )
    return created
