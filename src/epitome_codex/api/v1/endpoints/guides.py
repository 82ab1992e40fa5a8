# src/epitome_codex/api/v1/endpoints/guides.py
"""Guide endpoints for the Epitome Codex API."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from epitome_codex.core.errors import CodexError
from epitome_codex.schemas.guide import GuideCreate, GuideResponse, GuideUpdate
from epitome_codex.services import guide_service

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep, http_error

router = APIRouter(prefix="/guides", tags=["guides"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[GuideResponse])
async def list_guides(
    db: SessionDep,
    current_user: OptionalUserDep,
    category: str | None = None,
    search: str | None = None,
    featured: bool = False,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
) -> list[GuideResponse]:
    """List published guides; authors listing their own also see drafts."""
    guides = guide_service.list_guides(
        db,
        viewer=current_user,
        category=category,
        search=search,
        featured=featured,
        user_id=user_id,
    )
    return [GuideResponse.model_validate(guide) for guide in guides]


@router.post("/", response_model=GuideResponse, status_code=status.HTTP_201_CREATED)
async def create_guide(
    payload: GuideCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> GuideResponse:
    """Write a new guide."""
    guide = guide_service.create_guide(db, current_user, payload)
    return GuideResponse.model_validate(guide)


@router.get("/{slug}", response_model=GuideResponse)
async def get_guide(slug: str, current_user: OptionalUserDep, db: SessionDep) -> GuideResponse:
    """Fetch a guide by slug and count the view."""
    try:
        guide = guide_service.get_guide(db, slug, viewer=current_user)
    except CodexError as err:
        raise http_error(err) from err
    return GuideResponse.model_validate(guide)


@router.put("/{slug}", response_model=GuideResponse)
async def update_guide(
    slug: str,
    payload: GuideUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> GuideResponse:
    """Update a guide; only its author or an admin may do so."""
    try:
        guide = guide_service.update_guide(db, current_user, slug, payload)
    except CodexError as err:
        raise http_error(err) from err
    return GuideResponse.model_validate(guide)


@router.delete("/{slug}")
async def delete_guide(slug: str, current_user: CurrentUserDep, db: SessionDep) -> dict[str, bool]:
    """Delete a guide; only its author or an admin may do so."""
    try:
        guide_service.delete_guide(db, current_user, slug)
    except CodexError as err:
        logger.warning("Guide %s not deleted for %s: %s", slug, current_user.id, err)
        raise http_error(err) from err
    return {"success": True}
