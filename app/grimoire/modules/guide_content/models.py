from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.grimoire.models import Base


class GuideExpandedContent(Base):
    """Long-form sections of the new-player guide. One row keyed "main"."""

    __tablename__ = "guide_expanded_content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    key: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    concept: Mapped[str | None] = mapped_column(Text, nullable=True)
    attributes: Mapped[str | None] = mapped_column(Text, nullable=True)
    abilities: Mapped[str | None] = mapped_column(Text, nullable=True)
    spheres: Mapped[str | None] = mapped_column(Text, nullable=True)
    backgrounds: Mapped[str | None] = mapped_column(Text, nullable=True)
    freebies: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
