# src/epitome_codex/models/user.py
"""SQLAlchemy model for site accounts."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from epitome_codex.core.settings import settings
from epitome_codex.db.session import Base
from epitome_codex.db.time import utcnow

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"


class User(Base):
    """Account mirrored from the OAuth provider.

    Sign-in itself happens elsewhere; this row only anchors ownership of
    builds and votes.
    """

    __tablename__ = "user_account"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    username: Mapped[str | None] = mapped_column(String(64), unique=True, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Stored as a plain string: USER or ADMIN.
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=ROLE_USER)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @property
    def is_admin(self) -> bool:
        """Admins hold the ADMIN role or are listed in ``ADMIN_USERNAMES``."""
        if self.role == ROLE_ADMIN:
            return True
        return self.username is not None and self.username in settings.admin_usernames
