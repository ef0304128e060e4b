from __future__ import annotations

from typing import TYPE_CHECKING

from app.grimoire.modules.site_settings.service import get_main_row, keyed_payload, upsert_main_row

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.grimoire.modules.character_creation.models import CharacterCreationContent


# Wire names match the column names; every section defaults to "".
FIELDS = {name: name for name in ("overview", "attributes", "abilities", "spheres", "finishing")}


def get_content(s: "Session") -> dict[str, str]:
    from app.grimoire.modules.character_creation.models import CharacterCreationContent

    return keyed_payload(get_main_row(s, CharacterCreationContent), FIELDS)


def update_content(s: "Session", payload: dict) -> tuple["CharacterCreationContent", list[str]]:
    from app.grimoire.modules.character_creation.models import CharacterCreationContent

    return upsert_main_row(s, CharacterCreationContent, FIELDS, payload)
