from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, backref, mapped_column, relationship

from app.grimoire.models import Base, isoformat
from app.grimoire.modules.rotes.models import Rote


class Character(Base):
    __tablename__ = "characters"
    __table_args__ = (Index("idx_characters_user", "user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    faction: Mapped[str] = mapped_column(String(128), nullable=False)
    concept: Mapped[str | None] = mapped_column(String(255), nullable=True)
    arete: Mapped[int | None] = mapped_column(Integer, nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(128), nullable=True)
    essence: Mapped[str | None] = mapped_column(String(64), nullable=True)  # Dynamic, Pattern, Primordial, Questing

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    rotes: Mapped[list["CharacterRote"]] = relationship(
        "CharacterRote",
        back_populates="character",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="CharacterRote.created_at.desc()",
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "faction": self.faction,
            "concept": self.concept,
            "arete": self.arete,
            "avatar": self.avatar,
            "essence": self.essence,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
            "rotes": [cr.to_dict() for cr in self.rotes],
        }


class CharacterRote(Base):
    __tablename__ = "character_rotes"
    __table_args__ = (UniqueConstraint("character_id", "rote_id", name="uq_character_rote"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    character_id: Mapped[int] = mapped_column(ForeignKey("characters.id", ondelete="CASCADE"), nullable=False)
    rote_id: Mapped[int] = mapped_column(ForeignKey("rotes.id", ondelete="CASCADE"), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    specialty: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    character: Mapped[Character] = relationship("Character", back_populates="rotes")
    # Deleting a rote drops its assignments too.
    rote: Mapped[Rote] = relationship(
        "Rote",
        lazy="selectin",
        backref=backref("assignments", cascade="all, delete-orphan"),
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "characterId": self.character_id,
            "roteId": self.rote_id,
            "notes": self.notes,
            "specialty": self.specialty,
            "createdAt": isoformat(self.created_at),
            "rote": self.rote.to_dict() if self.rote else None,
        }
