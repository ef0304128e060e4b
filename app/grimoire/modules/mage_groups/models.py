from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.grimoire.models import Base, isoformat


class MageGroup(Base):
    """A Tradition, Convention, Craft or other faction write-up."""

    __tablename__ = "mage_groups"
    __table_args__ = (
        Index("idx_mage_groups_category_sort", "category", "sort_order"),
        Index("idx_mage_groups_published", "published"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(128), nullable=False)  # e.g. "Tradition", "Convention", "Craft"
    description: Mapped[str] = mapped_column(Text, nullable=False)
    philosophy: Mapped[str | None] = mapped_column(Text, nullable=True)
    practices: Mapped[str | None] = mapped_column(Text, nullable=True)
    organization: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Clients send headerImage/sidebarImage; they are stored as logo/symbol.
    logo_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    symbol_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    representative_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "category": self.category,
            "description": self.description,
            "philosophy": self.philosophy,
            "practices": self.practices,
            "organization": self.organization,
            "logoImage": self.logo_image,
            "symbolImage": self.symbol_image,
            "representativeImage": self.representative_image,
            "headerImage": self.logo_image,
            "sidebarImage": self.symbol_image,
            "published": self.published,
            "sortOrder": self.sort_order,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
