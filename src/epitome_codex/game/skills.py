# src/epitome_codex/game/skills.py
"""Skill evolution tiers.

Skills evolve as points are invested: 0 is locked, then basic, developed,
master and perfect. A single skill caps at 45 points.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from epitome_codex.core.errors import InvalidArgument

MAX_SKILL_POINTS: Final[int] = 45
SKILLS_PER_CLASS: Final[int] = 6
MAX_TOTAL_SKILL_POINTS: Final[int] = SKILLS_PER_CLASS * MAX_SKILL_POINTS


class EvolutionLevel(str, Enum):
    NONE = "NONE"
    BASIC = "BASIC"
    DEVELOPED = "DEVELOPED"
    MASTER = "MASTER"
    PERFECT = "PERFECT"


@dataclass(frozen=True)
class EvolutionTier:
    min_points: int
    max_points: int
    suffix: str
    label: str


EVOLUTION_TIERS: Final[dict[EvolutionLevel, EvolutionTier]] = {
    EvolutionLevel.NONE: EvolutionTier(0, 0, "", "Locked"),
    EvolutionLevel.BASIC: EvolutionTier(1, 14, "_basic", "Basic"),
    EvolutionLevel.DEVELOPED: EvolutionTier(15, 24, "_developed", "Developed"),
    EvolutionLevel.MASTER: EvolutionTier(25, 34, "_master", "Master"),
    EvolutionLevel.PERFECT: EvolutionTier(35, 45, "_perfect", "Perfect"),
}


def evolution_level(points: int) -> EvolutionLevel:
    if points <= 0:
        return EvolutionLevel.NONE
    if points <= 14:
        return EvolutionLevel.BASIC
    if points <= 24:
        return EvolutionLevel.DEVELOPED
    if points <= 34:
        return EvolutionLevel.MASTER
    return EvolutionLevel.PERFECT


def skill_icon_path(base_icon_path: str, points: int) -> str:
    """Return the icon for a skill at ``points``.

    ``base_icon_path`` may carry the ``.png`` extension or not. Locked skills
    reuse the basic icon; the frontend greys it out.
    """
    stem = base_icon_path.removesuffix(".png")
    level = evolution_level(points)
    if level is EvolutionLevel.NONE:
        return f"{stem}_basic.png"
    return f"{stem}{EVOLUTION_TIERS[level].suffix}.png"


def validate_skill_points(skill_points: Mapping[str, int]) -> None:
    """Check a build's skill allocation against the per-skill and total caps.

    Raises:
        InvalidArgument: If a skill is outside 0..45 or the total exceeds 270.
    """
    for skill, points in skill_points.items():
        if points < 0 or points > MAX_SKILL_POINTS:
            raise InvalidArgument(
                f"Skill '{skill}' must have between 0 and {MAX_SKILL_POINTS} points, got {points}"
            )
    total = sum(skill_points.values())
    if total > MAX_TOTAL_SKILL_POINTS:
        raise InvalidArgument(
            f"At most {MAX_TOTAL_SKILL_POINTS} skill points can be spent, got {total}"
        )
