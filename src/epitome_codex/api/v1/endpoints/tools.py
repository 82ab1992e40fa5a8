# src/epitome_codex/api/v1/endpoints/tools.py
"""Player tools: XP table and skill evolution lookups."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from epitome_codex.game.skills import (
    EVOLUTION_TIERS,
    MAX_SKILL_POINTS,
    MAX_TOTAL_SKILL_POINTS,
    evolution_level,
    skill_icon_path,
)
from epitome_codex.game.xp_table import (
    MAX_LEVEL,
    XP_TABLE,
    get_entry,
    xp_between_levels,
    xp_for_level,
)
from epitome_codex.schemas.tools import SkillEvolutionOut, XpBetweenOut, XpTableEntryOut

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("/xp-table", response_model=list[XpTableEntryOut])
async def get_xp_table() -> list[XpTableEntryOut]:
    """Return XP requirements for levels 1-100."""
    return [XpTableEntryOut.model_validate(entry) for entry in XP_TABLE]


@router.get("/xp-table/{level}", response_model=XpTableEntryOut)
async def get_xp_entry(level: int) -> XpTableEntryOut:
    """Return the XP row for a single level."""
    entry = get_entry(level)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Level must be between 1 and 100",
        )
    return XpTableEntryOut.model_validate(entry)


@router.get("/xp-between", response_model=XpBetweenOut)
async def get_xp_between(
    from_level: Annotated[int, Query(alias="from", ge=0, le=MAX_LEVEL)],
    to_level: Annotated[int, Query(alias="to", ge=0, le=MAX_LEVEL)],
) -> XpBetweenOut:
    """Return the XP needed to climb from one level to another.

    ``from=0`` counts from a fresh character. ``nextLevelXp`` is the
    requirement of ``from`` itself, 0 when it is outside 1..100.
    """
    return XpBetweenOut(
        from_level=from_level,
        to_level=to_level,
        xp_required=xp_between_levels(from_level, to_level),
        next_level_xp=xp_for_level(from_level),
    )


@router.get("/skill-evolution/{points}", response_model=SkillEvolutionOut)
async def get_skill_evolution(points: int, icon: str | None = None) -> SkillEvolutionOut:
    """Return the evolution tier reached with ``points`` in one skill.

    With ``icon`` (a base icon path) the response also names the tier's icon.
    """
    if points < 0 or points > MAX_SKILL_POINTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Skill points must be between 0 and {MAX_SKILL_POINTS}",
        )
    level = evolution_level(points)
    tier = EVOLUTION_TIERS[level]
    return SkillEvolutionOut(
        points=points,
        level=level.value,
        label=tier.label,
        suffix=tier.suffix,
        max_points=MAX_SKILL_POINTS,
        max_total_points=MAX_TOTAL_SKILL_POINTS,
        icon=skill_icon_path(icon, points) if icon else None,
    )
