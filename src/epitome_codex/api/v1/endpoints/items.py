# src/epitome_codex/api/v1/endpoints/items.py
"""Item wiki endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from epitome_codex.core.errors import CodexError
from epitome_codex.schemas.wiki import ItemDetail, ItemSummary
from epitome_codex.services import wiki

from ..dependencies import SessionDep, http_error

router = APIRouter(prefix="/items", tags=["items"])


@router.get("/", response_model=list[ItemSummary])
async def list_items(
    db: SessionDep,
    item_type: Annotated[str | None, Query(alias="type")] = None,
    rarity: str | None = None,
    search: str | None = None,
    is_gear: Annotated[bool | None, Query(alias="isGear")] = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
) -> list[ItemSummary]:
    """List items, rarest first."""
    try:
        items = wiki.list_items(
            db,
            item_type=item_type,
            rarity=rarity,
            search=search,
            is_gear=is_gear,
            limit=limit,
        )
    except CodexError as err:
        raise http_error(err) from err
    return [ItemSummary.model_validate(item) for item in items]


@router.get("/{slug}", response_model=ItemDetail)
async def get_item(slug: str, db: SessionDep) -> ItemDetail:
    try:
        item = wiki.get_item(db, slug)
    except CodexError as err:
        raise http_error(err) from err
    return ItemDetail.model_validate(item)
