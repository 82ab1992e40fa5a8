"""Business logic services for the Epitome Codex application."""

from . import build_service, guide_service, wiki
from .voting import (
    VoteCounters,
    VoteDirection,
    VoteOutcome,
    VoteResult,
    apply_vote,
    cast_vote,
    get_user_vote,
)

__all__ = [
    "build_service",
    "guide_service",
    "wiki",
    "VoteCounters",
    "VoteDirection",
    "VoteOutcome",
    "VoteResult",
    "apply_vote",
    "cast_vote",
    "get_user_vote",
]
