# tests/services/test_voting_service.py
"""Tests for persisting votes against builds."""

import pytest
from sqlalchemy import select

from epitome_codex.core.errors import AuthenticationRequired, InvalidArgument, NotFound
from epitome_codex.models import BuildVote
from epitome_codex.services.voting import cast_vote, get_user_vote


def _votes(db_session, build_id):
    return db_session.scalars(select(BuildVote).where(BuildVote.build_id == build_id)).all()


def test_first_upvote_creates_record(db_session, test_user, test_build) -> None:
    result = cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="up")

    assert (result.upvotes, result.downvotes, result.user_vote) == (1, 0, "up")
    votes = _votes(db_session, test_build.id)
    assert len(votes) == 1
    assert votes[0].value == 1
    assert test_build.upvotes == 1


def test_repeat_vote_toggles_off(db_session, test_user, test_build) -> None:
    cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="down")
    result = cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="down")

    assert (result.upvotes, result.downvotes, result.user_vote) == (0, 0, None)
    assert _votes(db_session, test_build.id) == []


def test_flip_keeps_single_record(db_session, test_user, test_build) -> None:
    cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="up")
    result = cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="down")

    assert (result.upvotes, result.downvotes, result.user_vote) == (0, 1, "down")
    votes = _votes(db_session, test_build.id)
    assert [vote.value for vote in votes] == [-1]


def test_votes_from_different_users_accumulate(
    db_session, test_user, other_user, test_build
) -> None:
    cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="up")
    result = cast_vote(db_session, user=other_user, build_id=test_build.id, vote_type="up")

    assert (result.upvotes, result.downvotes) == (2, 0)
    assert get_user_vote(db_session, user=test_user, build_id=test_build.id) == "up"
    assert get_user_vote(db_session, user=other_user, build_id=test_build.id) == "up"


def test_drifted_counter_is_clamped(db_session, test_user, make_build) -> None:
    build = make_build(user_id=test_user.id, upvotes=0, downvotes=3)
    db_session.add(BuildVote(user_id=test_user.id, build_id=build.id, value=1))
    db_session.flush()

    result = cast_vote(db_session, user=test_user, build_id=build.id, vote_type="up")

    assert (result.upvotes, result.downvotes, result.user_vote) == (0, 3, None)
    assert build.upvotes == 0


def test_anonymous_vote_is_rejected(db_session, test_build) -> None:
    with pytest.raises(AuthenticationRequired):
        cast_vote(db_session, user=None, build_id=test_build.id, vote_type="up")


def test_invalid_type_is_rejected(db_session, test_user, test_build) -> None:
    with pytest.raises(InvalidArgument):
        cast_vote(db_session, user=test_user, build_id=test_build.id, vote_type="meh")
    assert _votes(db_session, test_build.id) == []


def test_unknown_build_is_rejected(db_session, test_user) -> None:
    with pytest.raises(NotFound):
        cast_vote(db_session, user=test_user, build_id="missing", vote_type="up")


def test_user_vote_for_anonymous_caller(db_session, test_build) -> None:
    assert get_user_vote(db_session, user=None, build_id=test_build.id) is None
