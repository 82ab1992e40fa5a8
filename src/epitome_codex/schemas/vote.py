# src/epitome_codex/schemas/vote.py
"""Vote-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class VoteCreate(CamelModel):
    """Schema for casting a vote; ``type`` is checked by the vote rules."""

    type: str = Field(..., description="'up' or 'down'")


class UserVoteResponse(CamelModel):
    user_vote: str | None = None


class VoteResponse(CamelModel):
    upvotes: int
    downvotes: int
    user_vote: str | None = None
