# src/epitome_codex/api/v1/endpoints/mobs.py
"""Mob wiki endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from epitome_codex.core.errors import CodexError
from epitome_codex.schemas.wiki import MobListResponse, MobResponse
from epitome_codex.services import wiki

from ..dependencies import SessionDep, http_error

router = APIRouter(prefix="/mobs", tags=["mobs"])


@router.get("/", response_model=MobListResponse)
async def list_mobs(
    db: SessionDep,
    search: str | None = None,
    category: str | None = None,
    mob_type: Annotated[str | None, Query(alias="mobType")] = None,
    biome: str | None = None,
    min_level: Annotated[int | None, Query(alias="minLevel")] = None,
    max_level: Annotated[int | None, Query(alias="maxLevel")] = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> MobListResponse:
    """List active mobs by level with optional filters."""
    page = wiki.list_mobs(
        db,
        search=search,
        category=category,
        mob_type=mob_type,
        biome=biome,
        min_level=min_level,
        max_level=max_level,
        limit=limit,
        offset=offset,
    )
    return MobListResponse(
        mobs=[MobResponse.model_validate(mob) for mob in page.mobs],
        total=page.total,
        has_more=page.has_more,
    )


@router.get("/{slug}", response_model=MobResponse)
async def get_mob(slug: str, db: SessionDep) -> MobResponse:
    try:
        mob = wiki.get_mob(db, slug)
    except CodexError as err:
        raise http_error(err) from err
    return MobResponse.model_validate(mob)
