# tests/services/test_voting_rules.py
"""Tests for the pure vote transition rules."""

import itertools

import pytest

from epitome_codex.core.errors import InvalidArgument
from epitome_codex.services.voting import (
    VoteCounters,
    VoteDirection,
    VoteOutcome,
    apply_vote,
)

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


@pytest.mark.parametrize(
    ("existing", "requested", "expected"),
    [
        (None, "up", VoteOutcome(UP, 1, 0)),
        (None, "down", VoteOutcome(DOWN, 0, 1)),
        (UP, "up", VoteOutcome(None, -1, 0)),
        (DOWN, "down", VoteOutcome(None, 0, -1)),
        (UP, "down", VoteOutcome(DOWN, -1, 1)),
        (DOWN, "up", VoteOutcome(UP, 1, -1)),
    ],
)
def test_transition_table(existing, requested, expected) -> None:
    assert apply_vote(existing, requested) == expected


def test_direction_values_are_accepted() -> None:
    assert apply_vote(None, DOWN) == VoteOutcome(DOWN, 0, 1)


@pytest.mark.parametrize("requested", ["", "UP", "sideways", None, 1])
def test_unknown_direction_is_rejected(requested) -> None:
    with pytest.raises(InvalidArgument, match="Invalid vote type"):
        apply_vote(None, requested)


def test_counters_are_floored_at_zero() -> None:
    counters = VoteCounters(0, 0).apply(VoteOutcome(None, -1, -1))
    assert counters == VoteCounters(0, 0)


def test_alternating_votes_return_to_start() -> None:
    state = None
    counters = VoteCounters()
    for requested in ("up", "down", "up", "down"):
        outcome = apply_vote(state, requested)
        state = outcome.new_state
        counters = counters.apply(outcome)

    assert state is DOWN
    assert counters == VoteCounters(0, 1)

    outcome = apply_vote(state, "down")
    assert outcome.new_state is None
    assert counters.apply(outcome) == VoteCounters(0, 0)


def test_counters_never_negative_for_any_sequence() -> None:
    for sequence in itertools.product(("up", "down"), repeat=5):
        state = None
        counters = VoteCounters()
        for requested in sequence:
            outcome = apply_vote(state, requested)
            state = outcome.new_state
            counters = counters.apply(outcome)
            assert counters.upvotes >= 0
            assert counters.downvotes >= 0
        # A single voter contributes at most one vote.
        assert counters.upvotes + counters.downvotes == (0 if state is None else 1)


def test_direction_labels() -> None:
    assert UP.label == "up"
    assert DOWN.label == "down"
    assert VoteDirection.parse("down") is DOWN
