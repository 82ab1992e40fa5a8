# src/epitome_codex/api/v1/endpoints/admin.py
"""Admin moderation of builds."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from epitome_codex.core.errors import CodexError
from epitome_codex.schemas.build import BuildListResponse, BuildModeration, BuildResponse
from epitome_codex.services import build_service

from ..dependencies import AdminUserDep, SessionDep, http_error

router = APIRouter(prefix="/admin/builds", tags=["admin"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=BuildListResponse)
async def list_all_builds(
    admin: AdminUserDep,
    db: SessionDep,
    search: str | None = None,
    status: Annotated[str | None, Query(description="published, draft or all")] = None,
    character_class: Annotated[str | None, Query(alias="class")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> BuildListResponse:
    """List every build, drafts included."""
    try:
        page = build_service.admin_list_builds(
            db,
            search=search,
            status=status,
            character_class=character_class,
            limit=limit,
            offset=offset,
        )
    except CodexError as err:
        raise http_error(err) from err
    return BuildListResponse(
        builds=[BuildResponse.model_validate(build) for build in page.builds],
        total=page.total,
        has_more=page.has_more,
    )


@router.put("/{build_id}", response_model=BuildResponse)
async def moderate_build(
    build_id: str,
    payload: BuildModeration,
    admin: AdminUserDep,
    db: SessionDep,
) -> BuildResponse:
    """Publish, unpublish or retitle a build."""
    try:
        build = build_service.moderate_build(db, admin, build_id, payload)
    except CodexError as err:
        raise http_error(err) from err
    return BuildResponse.model_validate(build)


@router.delete("/{build_id}")
async def delete_any_build(build_id: str, admin: AdminUserDep, db: SessionDep) -> dict[str, bool]:
    """Delete a build and its votes regardless of owner."""
    try:
        build_service.delete_build(db, admin, build_id)
    except CodexError as err:
        raise http_error(err) from err
    logger.info("Admin %s deleted build %s", admin.id, build_id)
    return {"success": True}
