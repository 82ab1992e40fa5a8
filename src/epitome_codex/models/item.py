# src/epitome_codex/models/item.py
"""SQLAlchemy model for the item wiki."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from epitome_codex.db.session import Base
from epitome_codex.db.time import utcnow


class Item(Base):
    """Equipment, consumable or material as listed in the wiki."""

    __tablename__ = "item"
    __table_args__ = (
        Index("ix_item_type", "type"),
        Index("ix_item_rarity", "rarity"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(220), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    rarity: Mapped[str] = mapped_column(String(16), nullable=False, default="COMMON")
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_gear: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    stats: Mapped[dict[str, float]] = mapped_column(JSON, nullable=False, default=dict)
    required_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    required_class: Mapped[str | None] = mapped_column(String(16), nullable=True)
    # [{"mobName": ..., "dropRate": ..., "location": ...}]
    drop_sources: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    craft_recipe: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    enhancement_bonuses: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    enhancement_materials: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
