from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict[str, Any]:
        # never expose password_hash
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "createdAt": isoformat(self.created_at),
        }


class AuditEvent(Base):
    """
    Append-only audit trail event (admin actions, sign-in/sign-up).
    """

    __tablename__ = "audit_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
    request_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    actor_user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    actor_user_email: Mapped[str | None] = mapped_column(String(320), nullable=True)

    action: Mapped[str] = mapped_column(String(128), nullable=False)  # e.g. "admin.seed"
    entity_type: Mapped[str | None] = mapped_column(String(128), nullable=True)  # e.g. "Rote"
    entity_id: Mapped[str | None] = mapped_column(String(128), nullable=True)

    reason: Mapped[str | None] = mapped_column(String(512), nullable=True)
    metadata_json: Mapped[str | None] = mapped_column(Text, nullable=True)
    client_ip: Mapped[str | None] = mapped_column(String(64), nullable=True)


# Module models register their tables on Base.metadata when imported.
# (Kept at bottom to avoid circular imports.)
from app.grimoire.modules.rotes.models import Rote  # noqa: E402,F401
from app.grimoire.modules.backgrounds.models import Background  # noqa: E402,F401
from app.grimoire.modules.resources.models import Resource  # noqa: E402,F401
from app.grimoire.modules.merits.models import Merit  # noqa: E402,F401
from app.grimoire.modules.characters.models import Character, CharacterRote  # noqa: E402,F401
from app.grimoire.modules.site_settings.models import SiteSettings  # noqa: E402,F401
from app.grimoire.modules.mage_groups.models import MageGroup  # noqa: E402,F401
from app.grimoire.modules.character_creation.models import CharacterCreationContent  # noqa: E402,F401
from app.grimoire.modules.guide_content.models import GuideExpandedContent  # noqa: E402,F401
