from __future__ import annotations

from typing import Any

from flask import request
from sqlalchemy.orm import Session

from app.grimoire.errors import NotFound


def json_body() -> dict[str, Any]:
    """Parsed JSON object from the request body. Anything else is a server-side failure."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def is_blank(value: Any) -> bool:
    """null, false, 0 and whitespace-only strings all count as missing."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    return False


def missing_fields(payload: dict, *names: str) -> list[str]:
    return [n for n in names if is_blank(payload.get(n))]


def clean_str(value: Any) -> str | None:
    """Strip strings; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("expected an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("expected an integer")
        return int(value)
    return int(str(value).strip())


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# Primary keys are signed 64-bit on both sqlite and postgres.
MAX_DB_ID = 2**63 - 1


def in_id_range(value: int) -> bool:
    return 0 < value <= MAX_DB_ID


def get_or_404(s: Session, model: type, obj_id: int, message: str):
    if not in_id_range(obj_id):
        raise NotFound(message)
    obj = s.get(model, obj_id)
    if obj is None:
        raise NotFound(message)
    return obj
