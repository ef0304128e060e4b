from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.grimoire.models import Base, isoformat


class Rote(Base):
    __tablename__ = "rotes"
    __table_args__ = (
        Index("idx_rotes_tradition", "tradition"),
        Index("idx_rotes_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tradition: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # {"Forces": 3, "Prime": 2}
    spheres: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    level: Mapped[str] = mapped_column(String(64), nullable=False)  # e.g. "Disciple"
    page_ref: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tradition": self.tradition,
            "description": self.description,
            "spheres": self.spheres or {},
            "level": self.level,
            "pageRef": self.page_ref,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
