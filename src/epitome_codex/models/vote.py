# src/epitome_codex/models/vote.py
"""Models capturing voting interactions on builds."""

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from epitome_codex.db.session import Base


class BuildVote(Base):
    """Per-user vote on a build."""

    __tablename__ = "build_vote"
    __table_args__ = (
        CheckConstraint("value IN (1, -1)", name="ck_build_vote_value"),
        # One vote per user per build.
        UniqueConstraint("user_id", "build_id", name="uq_build_vote_user_build"),
        Index("ix_build_vote_build_id", "build_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    build_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("build.id", ondelete="CASCADE"),
        nullable=False,
    )

    # 1 = upvote, -1 = downvote.
    value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
