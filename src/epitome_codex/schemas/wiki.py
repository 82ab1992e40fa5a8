# src/epitome_codex/schemas/wiki.py
"""Item and mob wiki schemas."""

from typing import Any

from .common import CamelModel


class ItemSummary(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None
    type: str
    rarity: str
    level: int
    image_url: str | None
    is_gear: bool
    stats: dict[str, float]
    required_level: int | None
    required_class: str | None
    enhancement_bonuses: dict[str, Any]
    enhancement_materials: dict[str, Any]


class ItemDetail(ItemSummary):
    """Single item, including where it drops and how it is crafted."""

    drop_sources: list[dict[str, Any]]
    craft_recipe: dict[str, Any] | None


class MobResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None
    level: int
    xp_reward: int
    respawn_time: int | None
    mob_type: str | None
    category: str | None
    biome: str | None
    image_url: str | None
    stats: dict[str, float]
    drops: list[dict[str, Any]]
    archon_drop_min: int | None
    archon_drop_max: int | None


class MobListResponse(CamelModel):
    mobs: list[MobResponse]
    total: int
    has_more: bool
