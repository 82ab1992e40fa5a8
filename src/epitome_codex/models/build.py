# src/epitome_codex/models/build.py
"""SQLAlchemy model for community character builds."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from epitome_codex.db.session import Base
from epitome_codex.db.time import utcnow

from .user import User


def _empty_allocation() -> dict[str, int]:
    return {"vig": 0, "int": 0, "str": 0, "dex": 0}


class Build(Base):
    """A published (or draft) character build that the community can vote on."""

    __tablename__ = "build"
    __table_args__ = (
        Index("ix_build_class", "class"),
        Index("ix_build_upvotes", "upvotes"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Long-form markdown guide; rendered by the frontend.
    guide: Mapped[str | None] = mapped_column(Text, nullable=True)
    # "class" is reserved in Python, so the attribute is character_class.
    character_class: Mapped[str] = mapped_column("class", String(16), nullable=False)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    stats_allocation: Mapped[dict[str, int]] = mapped_column(
        JSON,
        nullable=False,
        default=_empty_allocation,
    )
    equipment: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    skill_points: Mapped[dict[str, int]] = mapped_column(JSON, nullable=False, default=dict)
    skill_path: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Denormalized tallies maintained by the vote service; never negative.
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    user: Mapped[User | None] = relationship("User")
