"""Read-only item and mob wiki queries."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from epitome_codex.core.errors import InvalidArgument, NotFound
from epitome_codex.game.items import ITEM_TYPES, RARITIES
from epitome_codex.models import Item, Mob

_RARITY_ORDER = case(
    {rarity: rank for rank, rarity in enumerate(RARITIES)},
    value=Item.rarity,
    else_=-1,
)


def list_items(
    db: Session,
    *,
    item_type: str | None = None,
    rarity: str | None = None,
    search: str | None = None,
    is_gear: bool | None = None,
    limit: int = 50,
) -> Sequence[Item]:
    """Return items, rarest and highest level first.

    Raises:
        InvalidArgument: If the type or rarity filter names no known value.
    """
    if limit < 1:
        raise InvalidArgument("limit must be positive")
    if item_type and item_type not in ITEM_TYPES:
        raise InvalidArgument(f"Unknown item type: {item_type!r}")
    if rarity and rarity not in RARITIES:
        raise InvalidArgument(f"Unknown rarity: {rarity!r}")

    conditions = []
    if is_gear is not None:
        conditions.append(Item.is_gear.is_(is_gear))
    if item_type:
        conditions.append(Item.type == item_type)
    if rarity:
        conditions.append(Item.rarity == rarity)
    if search:
        conditions.append(Item.name.contains(search, autoescape=True))

    stmt = (
        select(Item)
        .where(*conditions)
        .order_by(_RARITY_ORDER.desc(), Item.level.desc(), Item.name)
        .limit(limit)
    )
    return db.scalars(stmt).all()


def get_item(db: Session, slug: str) -> Item:
    item = db.scalar(select(Item).where(Item.slug == slug))
    if item is None:
        raise NotFound("Item not found")
    return item


@dataclass(frozen=True)
class MobPage:
    mobs: Sequence[Mob]
    total: int
    has_more: bool


def list_mobs(
    db: Session,
    *,
    search: str | None = None,
    category: str | None = None,
    mob_type: str | None = None,
    biome: str | None = None,
    min_level: int | None = None,
    max_level: int | None = None,
    limit: int = 50,
    offset: int = 0,
) -> MobPage:
    """Return active mobs ordered by level.

    ``"all"`` for category, type or biome means no filter; the level bounds
    are inclusive.
    """
    if limit < 1 or offset < 0:
        raise InvalidArgument("limit must be positive and offset non-negative")

    conditions = [Mob.is_active.is_(True)]
    if search:
        conditions.append(Mob.name.contains(search, autoescape=True))
    for column, value in ((Mob.category, category), (Mob.mob_type, mob_type), (Mob.biome, biome)):
        if value and value != "all":
            conditions.append(column == value)
    if min_level is not None:
        conditions.append(Mob.level >= min_level)
    if max_level is not None:
        conditions.append(Mob.level <= max_level)

    total = db.scalar(select(func.count()).select_from(Mob).where(*conditions)) or 0
    mobs = db.scalars(
        select(Mob)
        .where(*conditions)
        .order_by(Mob.level.asc(), Mob.name)
        .limit(limit)
        .offset(offset)
    ).all()
    return MobPage(mobs=mobs, total=total, has_more=offset + len(mobs) < total)


def get_mob(db: Session, slug: str) -> Mob:
    """Return an active mob by slug.

    Raises:
        NotFound: If no active mob has that slug.
    """
    mob = db.scalar(select(Mob).where(Mob.slug == slug, Mob.is_active.is_(True)))
    if mob is None:
        raise NotFound("Mob not found")
    return mob
