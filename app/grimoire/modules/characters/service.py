from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.grimoire.errors import NotFound
from app.grimoire.utils import clean_str, in_id_range, parse_bool, parse_int

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.grimoire.models import User
    from app.grimoire.modules.characters.models import Character, CharacterRote


VALID_ESSENCES = ("Dynamic", "Pattern", "Primordial", "Questing")


def validate_character_payload(payload: dict, *, partial: bool = False) -> list[str]:
    """Returns list of errors. ``partial`` skips the required-field check (updates)."""
    errors = []
    if not partial:
        name = (str(payload.get("name") or "")).strip()
        faction = (str(payload.get("faction") or "")).strip()
        if not name or not faction:
            errors.append("Name and faction are required")
            return errors
    arete = payload.get("arete")
    if arete not in (None, ""):
        try:
            value = parse_int(arete)
        except (TypeError, ValueError):
            errors.append("Arete must be a number from 1 to 10")
        else:
            if value is not None and not 1 <= value <= 10:
                errors.append("Arete must be a number from 1 to 10")
    essence = clean_str(payload.get("essence"))
    if essence and essence not in VALID_ESSENCES:
        errors.append(f"Invalid essence. Must be one of: {', '.join(VALID_ESSENCES)}")
    return errors


def list_characters(s: "Session", user: "User") -> list["Character"]:
    from app.grimoire.modules.characters.models import Character

    return (
        s.query(Character)
        .filter(Character.user_id == user.id)
        .order_by(Character.created_at.desc(), Character.id.desc())
        .all()
    )


def get_owned_character(s: "Session", user: "User", character_id: int) -> "Character":
    """Someone else's character is reported the same as a missing one."""
    from app.grimoire.modules.characters.models import Character

    if not in_id_range(character_id):
        raise NotFound("Character not found")
    character = (
        s.query(Character)
        .filter(Character.id == character_id)
        .filter(Character.user_id == user.id)
        .one_or_none()
    )
    if character is None:
        raise NotFound("Character not found")
    return character


def create_character(s: "Session", payload: dict, user: "User") -> "Character":
    from app.grimoire.modules.characters.models import Character

    now = datetime.utcnow()
    character = Character(
        user_id=user.id,
        name=str(payload["name"]).strip(),
        faction=str(payload["faction"]).strip(),
        concept=clean_str(payload.get("concept")),
        arete=parse_int(payload.get("arete")),
        avatar=clean_str(payload.get("avatar")),
        essence=clean_str(payload.get("essence")),
        created_at=now,
        updated_at=now,
    )
    s.add(character)
    s.flush()
    return character


def update_character(s: "Session", character: "Character", payload: dict) -> "Character":
    """Blank name/faction keep the old value; other fields change only when present."""
    name = clean_str(payload.get("name"))
    if name:
        character.name = name
    faction = clean_str(payload.get("faction"))
    if faction:
        character.faction = faction
    if "concept" in payload:
        character.concept = clean_str(payload.get("concept"))
    if "arete" in payload:
        character.arete = parse_int(payload.get("arete"))
    if "avatar" in payload:
        character.avatar = clean_str(payload.get("avatar"))
    if "essence" in payload:
        character.essence = clean_str(payload.get("essence"))
    character.updated_at = datetime.utcnow()
    s.flush()
    return character


def assign_rote(s: "Session", character: "Character", rote_id: int, *, notes=None, specialty=False) -> "CharacterRote":
    """Raises IntegrityError (on flush) when the rote is already assigned."""
    from app.grimoire.modules.characters.models import CharacterRote
    from app.grimoire.modules.rotes.models import Rote

    rote = s.get(Rote, rote_id) if in_id_range(rote_id) else None
    if rote is None:
        raise NotFound("Rote not found")

    # Attach through both relationships; both parents cascade delete-orphan.
    assignment = CharacterRote(
        character=character,
        rote=rote,
        notes=clean_str(notes),
        specialty=parse_bool(specialty),
        created_at=datetime.utcnow(),
    )
    s.add(assignment)
    s.flush()
    return assignment


def remove_rote(s: "Session", character: "Character", rote_id: int) -> int:
    from app.grimoire.modules.characters.models import CharacterRote

    if not in_id_range(rote_id):
        return 0
    removed = (
        s.query(CharacterRote)
        .filter(CharacterRote.character_id == character.id)
        .filter(CharacterRote.rote_id == rote_id)
        .delete(synchronize_session=False)
    )
    s.flush()
    return removed
