from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.grimoire.models import Base, isoformat


class Background(Base):
    __tablename__ = "backgrounds"
    __table_args__ = (Index("idx_backgrounds_subtype", "subtype"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    category: Mapped[str | None] = mapped_column(String(128), nullable=True)
    subtype: Mapped[str] = mapped_column(String(64), nullable=False)  # "general" or "mage"
    cost: Mapped[str] = mapped_column(String(64), nullable=False)  # e.g. "Variable", "Double Cost"
    description: Mapped[str] = mapped_column(Text, nullable=False)
    page_ref: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "subtype": self.subtype,
            "cost": self.cost,
            "description": self.description,
            "pageRef": self.page_ref,
            "createdAt": isoformat(self.created_at),
        }
