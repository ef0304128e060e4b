from __future__ import annotations

from typing import TYPE_CHECKING

from app.grimoire.modules.site_settings.service import get_main_row, keyed_payload, upsert_main_row

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.grimoire.modules.guide_content.models import GuideExpandedContent


FIELDS = {
    name: name for name in ("concept", "attributes", "abilities", "spheres", "backgrounds", "freebies")
}


def get_guide(s: "Session") -> dict[str, str]:
    from app.grimoire.modules.guide_content.models import GuideExpandedContent

    return keyed_payload(get_main_row(s, GuideExpandedContent), FIELDS)


def update_guide(s: "Session", payload: dict) -> tuple["GuideExpandedContent", list[str]]:
    from app.grimoire.modules.guide_content.models import GuideExpandedContent

    return upsert_main_row(s, GuideExpandedContent, FIELDS, payload)
