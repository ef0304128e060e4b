from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.grimoire.modules.site_settings.models import SiteSettings


# Editable copy lives in one row per table, keyed "main".
MAIN_KEY = "main"
SETTINGS_KEY = MAIN_KEY

# wire name -> column name
FIELDS = {
    "footerText": "footer_text",
    "welcomeTitle": "welcome_title",
    "welcomeText": "welcome_text",
    "aboutPage": "about_page",
    "howToUse": "how_to_use",
    "creditsPage": "credits_page",
}

DEFAULTS = {
    "footerText": "The Paradox Wheel © 2026",
    "welcomeTitle": "Welcome, Newly Awakened",
    "welcomeText": "",
    "aboutPage": "",
    "howToUse": "",
    "creditsPage": "",
}


def get_main_row(s: "Session", model: type):
    return s.query(model).filter(model.key == MAIN_KEY).one_or_none()


def keyed_payload(row, fields: dict[str, str], defaults: dict[str, str] | None = None) -> dict[str, str]:
    """Stored values by wire name; missing or empty values fall back to defaults (or "")."""
    defaults = defaults or {}
    out = {}
    for wire, column in fields.items():
        value = getattr(row, column) if row is not None else None
        out[wire] = value or defaults.get(wire, "")
    return out


def upsert_main_row(s: "Session", model: type, fields: dict[str, str], payload: dict) -> tuple[object, list[str]]:
    """
    Create the "main" row if needed and apply any known fields present in payload.
    Returns the row and the changed wire names. Unknown keys are ignored.
    """
    row = get_main_row(s, model)
    now = datetime.utcnow()
    if row is None:
        row = model(key=MAIN_KEY, created_at=now)
        s.add(row)

    changed = []
    for wire, column in fields.items():
        if wire not in payload:
            continue
        value = payload.get(wire)
        value = None if value is None else str(value)
        if getattr(row, column) != value:
            setattr(row, column, value)
            changed.append(wire)
    row.updated_at = now
    s.flush()
    return row, changed


def get_settings_row(s: "Session") -> "SiteSettings | None":
    from app.grimoire.modules.site_settings.models import SiteSettings

    return get_main_row(s, SiteSettings)


def settings_payload(row: "SiteSettings | None") -> dict[str, str]:
    return keyed_payload(row, FIELDS, DEFAULTS)


def upsert_settings(s: "Session", payload: dict) -> tuple["SiteSettings", list[str]]:
    from app.grimoire.modules.site_settings.models import SiteSettings

    return upsert_main_row(s, SiteSettings, FIELDS, payload)
