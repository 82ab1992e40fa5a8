# src/epitome_codex/models/mob.py
"""SQLAlchemy model for the monster wiki."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from epitome_codex.db.session import Base
from epitome_codex.db.time import utcnow


class Mob(Base):
    __tablename__ = "mob"
    __table_args__ = (Index("ix_mob_level", "level"),)

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(220), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    xp_reward: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Seconds.
    respawn_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mob_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)
    biome: Mapped[str | None] = mapped_column(String(64), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    stats: Mapped[dict[str, float]] = mapped_column(JSON, nullable=False, default=dict)
    drops: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    archon_drop_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    archon_drop_max: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Hidden mobs stay in the table but drop out of the public wiki.
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
