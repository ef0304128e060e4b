"""
Audit trail for admin actions and account events.

Admin endpoints go through ``admin_action`` / ``admin_denied`` so every
password-gated write, and every rejected password, leaves one row.
"""
import json
from typing import Any

from flask import current_app, g, has_request_context, request
from sqlalchemy.orm import Session

from app.grimoire.models import AuditEvent, User
from app.grimoire.rbac import current_user


def _request_meta() -> tuple[str | None, str | None]:
    if not has_request_context():
        return None, None
    return getattr(g, "request_id", None), request.remote_addr


def record_event(
    s: Session,
    *,
    actor: User | None,
    action: str,
    entity_type: str | None = None,
    entity_id: str | None = None,
    reason: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> AuditEvent:
    """Add an event to the session. The caller owns the commit."""
    request_id, client_ip = _request_meta()
    ev = AuditEvent(
        request_id=request_id,
        actor_user_id=actor.id if actor else None,
        actor_user_email=actor.email if actor else None,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        reason=reason,
        metadata_json=json.dumps(metadata, sort_keys=True) if metadata else None,
        client_ip=client_ip,
    )
    s.add(ev)
    return ev


def admin_action(
    s: Session,
    action: str,
    *,
    entity_type: str | None = None,
    entity_id: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> AuditEvent:
    """Record a successful password-gated change. Committed with the change itself."""
    current_app.logger.info("Admin action %s %s", action, metadata or "")
    return record_event(
        s,
        actor=current_user(),
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        metadata=metadata,
    )


def admin_denied(s: Session, action: str) -> None:
    """Record and commit a rejected admin password; the request fails right after."""
    record_event(s, actor=current_user(), action=f"{action}_denied", reason="Invalid admin password")
    s.commit()
    current_app.logger.warning("Admin password rejected for %s", action)
