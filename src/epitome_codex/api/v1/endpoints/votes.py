# src/epitome_codex/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Epitome Codex API."""

import logging

from fastapi import APIRouter

from epitome_codex.core.errors import CodexError
from epitome_codex.schemas.vote import UserVoteResponse, VoteCreate, VoteResponse
from epitome_codex.services.voting import cast_vote, get_user_vote

from ..dependencies import OptionalUserDep, SessionDep, http_error

router = APIRouter(prefix="/builds", tags=["votes"])
logger = logging.getLogger(__name__)


@router.get("/{build_id}/vote", response_model=UserVoteResponse)
async def get_my_vote(
    build_id: str,
    current_user: OptionalUserDep,
    db: SessionDep,
) -> UserVoteResponse:
    """Get the caller's vote on a build; anonymous callers get null."""
    return UserVoteResponse(user_vote=get_user_vote(db, user=current_user, build_id=build_id))


@router.post("/{build_id}/vote", response_model=VoteResponse)
async def vote_on_build(
    build_id: str,
    vote_data: VoteCreate,
    current_user: OptionalUserDep,
    db: SessionDep,
) -> VoteResponse:
    """Cast, flip or withdraw the caller's vote on a build."""
    try:
        result = cast_vote(db, user=current_user, build_id=build_id, vote_type=vote_data.type)
    except CodexError as err:
        logger.warning("Vote on build %s rejected: %s", build_id, err)
        raise http_error(err) from err
    return VoteResponse(
        upvotes=result.upvotes,
        downvotes=result.downvotes,
        user_vote=result.user_vote,
    )
