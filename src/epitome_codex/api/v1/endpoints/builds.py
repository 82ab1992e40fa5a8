# src/epitome_codex/api/v1/endpoints/builds.py
"""Build endpoints for the Epitome Codex API."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from epitome_codex.core.errors import CodexError
from epitome_codex.core.settings import settings
from epitome_codex.game.stats import StatAllocation, remaining_stat_points, total_stat_points
from epitome_codex.schemas.build import (
    BuildCreate,
    BuildListResponse,
    BuildResponse,
    BuildUpdate,
)
from epitome_codex.schemas.stats import DerivedStatsOut, ProjectionResponse
from epitome_codex.services import build_service

from ..dependencies import CurrentUserDep, SessionDep, http_error

router = APIRouter(prefix="/builds", tags=["builds"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=BuildListResponse)
async def list_builds(
    db: SessionDep,
    character_class: Annotated[str | None, Query(alias="class")] = None,
    tag: str | None = None,
    search: str | None = None,
    sort: str = "newest",
    limit: Annotated[int, Query(ge=1)] = settings.builds_page_limit_default,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> BuildListResponse:
    """List published builds with optional class, tag and title filters."""
    try:
        page = build_service.list_builds(
            db,
            character_class=character_class,
            tag=tag,
            search=search,
            sort=sort,
            limit=min(limit, settings.builds_page_limit_max),
            offset=offset,
        )
    except CodexError as err:
        raise http_error(err) from err
    return BuildListResponse(
        builds=[BuildResponse.model_validate(build) for build in page.builds],
        total=page.total,
        has_more=page.has_more,
    )


@router.post("/", response_model=BuildResponse, status_code=status.HTTP_201_CREATED)
async def create_build(
    payload: BuildCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> BuildResponse:
    """Create a new build owned by the caller."""
    try:
        build = build_service.create_build(db, current_user, payload)
    except CodexError as err:
        logger.warning("Rejected build from %s: %s", current_user.id, err)
        raise http_error(err) from err
    return BuildResponse.model_validate(build)


@router.get("/{build_id}", response_model=BuildResponse)
async def get_build(build_id: str, db: SessionDep) -> BuildResponse:
    """Fetch a single build."""
    try:
        build = build_service.get_build(db, build_id)
    except CodexError as err:
        raise http_error(err) from err
    return BuildResponse.model_validate(build)


@router.put("/{build_id}", response_model=BuildResponse)
async def update_build(
    build_id: str,
    payload: BuildUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> BuildResponse:
    """Update a build; only its owner may do so."""
    try:
        build = build_service.update_build(db, current_user, build_id, payload)
    except CodexError as err:
        raise http_error(err) from err
    return BuildResponse.model_validate(build)


@router.delete("/{build_id}")
async def delete_build(
    build_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, bool]:
    """Delete a build; only its owner may do so."""
    try:
        build_service.delete_build(db, current_user, build_id)
    except CodexError as err:
        raise http_error(err) from err
    return {"success": True}


@router.get("/{build_id}/stats", response_model=ProjectionResponse)
async def get_build_stats(build_id: str, db: SessionDep) -> ProjectionResponse:
    """Project the build's stored allocation into derived stats."""
    try:
        build = build_service.get_build(db, build_id)
        stats = build_service.project_build(build)
    except CodexError as err:
        raise http_error(err) from err

    allocation = StatAllocation.from_mapping(build.stats_allocation)
    return ProjectionResponse(
        character_class=build.character_class,
        level=build.level,
        stats=DerivedStatsOut.from_stats(stats),
        total_points=total_stat_points(build.level),
        allocated_points=allocation.total,
        remaining_points=remaining_stat_points(build.level, allocation),
    )
