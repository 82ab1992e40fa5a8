# src/epitome_codex/services/voting.py
"""Build voting: the up/down toggle rules and their persistence.

Each user holds at most one vote per build. Repeating the current direction
removes the vote, the opposite direction flips it. The build carries
denormalized ``upvotes``/``downvotes`` counters that move by the deltas of
each transition and are clamped at zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from sqlalchemy import case, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from epitome_codex.core.errors import (
    AuthenticationRequired,
    Conflict,
    InvalidArgument,
    NotFound,
)
from epitome_codex.models import Build, BuildVote, User

logger = logging.getLogger(__name__)


class VoteDirection(IntEnum):
    """Persisted vote value."""

    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, vote_type: str | VoteDirection) -> VoteDirection:
        """Map ``"up"``/``"down"`` (or a direction) to a direction.

        Raises:
            InvalidArgument: For anything else.
        """
        if isinstance(vote_type, VoteDirection):
            return vote_type
        if vote_type == "up":
            return cls.UP
        if vote_type == "down":
            return cls.DOWN
        raise InvalidArgument("Invalid vote type")

    @property
    def label(self) -> str:
        return "up" if self is VoteDirection.UP else "down"


@dataclass(frozen=True)
class VoteOutcome:
    """Result of one transition: the new vote state and counter deltas."""

    new_state: VoteDirection | None
    upvote_delta: int
    downvote_delta: int


@dataclass(frozen=True)
class VoteCounters:
    upvotes: int = 0
    downvotes: int = 0

    def apply(self, outcome: VoteOutcome) -> VoteCounters:
        """Add the deltas of ``outcome``, flooring both counters at zero."""
        return VoteCounters(
            upvotes=max(0, self.upvotes + outcome.upvote_delta),
            downvotes=max(0, self.downvotes + outcome.downvote_delta),
        )


def apply_vote(
    existing: VoteDirection | None,
    requested: str | VoteDirection,
) -> VoteOutcome:
    """Compute the transition for a user's vote request.

    Args:
        existing: The user's current vote on the target, or None.
        requested: ``"up"`` or ``"down"``.

    Returns:
        The resulting vote state and how much each counter moves.

    Raises:
        InvalidArgument: If ``requested`` is not a known direction.
    """
    direction = VoteDirection.parse(requested)

    if existing is None:
        if direction is VoteDirection.UP:
            return VoteOutcome(VoteDirection.UP, 1, 0)
        return VoteOutcome(VoteDirection.DOWN, 0, 1)

    if existing == direction:
        # Same direction again toggles the vote off.
        if direction is VoteDirection.UP:
            return VoteOutcome(None, -1, 0)
        return VoteOutcome(None, 0, -1)

    if direction is VoteDirection.UP:
        return VoteOutcome(VoteDirection.UP, 1, -1)
    return VoteOutcome(VoteDirection.DOWN, -1, 1)


@dataclass(frozen=True)
class VoteResult:
    """What the caller sees after casting a vote."""

    upvotes: int
    downvotes: int
    user_vote: str | None


_MAX_ATTEMPTS = 3


class _StaleVote(Exception):
    """The caller's vote row changed between reading and writing it."""


def _get_build_for_update(db: Session, build_id: str) -> Build:
    # Row lock where supported (PostgreSQL); SQLite drops the hint, so the
    # writes below stay correct without it.
    build = db.execute(
        select(Build)
        .where(Build.id == build_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()
    if build is None:
        raise NotFound("Build not found")
    return build


def _find_vote(db: Session, user_id: str, build_id: str) -> BuildVote | None:
    return db.execute(
        select(BuildVote)
        .where(
            BuildVote.user_id == user_id,
            BuildVote.build_id == build_id,
        )
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()


def _write_vote_row(
    db: Session,
    *,
    user_id: str,
    build_id: str,
    existing_vote: BuildVote | None,
    outcome: VoteOutcome,
) -> None:
    if existing_vote is None:
        # A concurrent first vote by the same user trips the unique constraint.
        db.add(BuildVote(user_id=user_id, build_id=build_id, value=int(outcome.new_state)))
        db.flush()
        return

    # Only touch the row while it still holds the value the transition was computed from.
    guard = (BuildVote.id == existing_vote.id, BuildVote.value == existing_vote.value)
    if outcome.new_state is None:
        result = db.execute(delete(BuildVote).where(*guard))
    else:
        result = db.execute(
            update(BuildVote).where(*guard).values(value=int(outcome.new_state))
        )
    if result.rowcount != 1:
        raise _StaleVote()


def _shifted(column, delta: int):
    if delta == 0:
        return column
    return case((column + delta < 0, 0), else_=column + delta)


def _apply_counter_deltas(db: Session, build_id: str, outcome: VoteOutcome) -> VoteCounters:
    """Move the build counters in SQL and return the stored result.

    The vote row write has already taken the write lock, so the values read
    here are current; the update itself never writes a value computed in Python.
    """
    upvotes, downvotes = db.execute(
        select(Build.upvotes, Build.downvotes).where(Build.id == build_id)
    ).one()
    raw_up = upvotes + outcome.upvote_delta
    raw_down = downvotes + outcome.downvote_delta
    if raw_up < 0 or raw_down < 0:
        logger.warning(
            "Clamped vote counters on build %s (up=%d, down=%d)",
            build_id,
            raw_up,
            raw_down,
        )

    db.execute(
        update(Build)
        .where(Build.id == build_id)
        .values(
            upvotes=_shifted(Build.upvotes, outcome.upvote_delta),
            downvotes=_shifted(Build.downvotes, outcome.downvote_delta),
        )
        .execution_options(synchronize_session="fetch")
    )
    upvotes, downvotes = db.execute(
        select(Build.upvotes, Build.downvotes).where(Build.id == build_id)
    ).one()
    return VoteCounters(upvotes, downvotes)


def _cast_once(
    db: Session,
    user_id: str,
    build_id: str,
    direction: VoteDirection,
) -> tuple[VoteOutcome, VoteCounters]:
    _get_build_for_update(db, build_id)
    existing_vote = _find_vote(db, user_id, build_id)
    existing = VoteDirection(existing_vote.value) if existing_vote else None

    outcome = apply_vote(existing, direction)
    _write_vote_row(
        db,
        user_id=user_id,
        build_id=build_id,
        existing_vote=existing_vote,
        outcome=outcome,
    )
    counters = _apply_counter_deltas(db, build_id, outcome)
    db.commit()
    return outcome, counters


def cast_vote(
    db: Session,
    *,
    user: User | None,
    build_id: str,
    vote_type: str,
) -> VoteResult:
    """Apply a vote request and persist the vote record and counters together.

    A request that loses a race with another request from the same user is
    rolled back and replayed against the vote that won.

    Raises:
        AuthenticationRequired: If ``user`` is None.
        InvalidArgument: If ``vote_type`` is not ``"up"`` or ``"down"``.
        NotFound: If the build does not exist.
        Conflict: If the vote kept changing underneath every attempt.
    """
    if user is None:
        raise AuthenticationRequired("You must be logged in to vote")
    direction = VoteDirection.parse(vote_type)
    user_id = user.id

    for attempt in range(1, _MAX_ATTEMPTS + 1):
        try:
            outcome, counters = _cast_once(db, user_id, build_id, direction)
        except (IntegrityError, StaleDataError, _StaleVote):
            db.rollback()
            logger.info(
                "Vote by %s on build %s raced another request (attempt %d)",
                user_id,
                build_id,
                attempt,
            )
            continue
        except Exception:
            db.rollback()
            raise
        break
    else:
        raise Conflict("Vote changed concurrently, please try again")

    user_vote = outcome.new_state.label if outcome.new_state is not None else None
    logger.info(
        "User %s voted %s on build %s -> %s",
        user_id,
        direction.label,
        build_id,
        user_vote or "none",
    )
    return VoteResult(upvotes=counters.upvotes, downvotes=counters.downvotes, user_vote=user_vote)


def get_user_vote(db: Session, *, user: User | None, build_id: str) -> str | None:
    """Return ``"up"``, ``"down"`` or None for the caller's vote on a build."""
    if user is None:
        return None
    vote = _find_vote(db, user.id, build_id)
    if vote is None:
        return None
    return VoteDirection(vote.value).label
