# src/epitome_codex/schemas/tools.py
"""Schemas for static game reference data."""

from epitome_codex.game.classes import CharacterClass

from .common import CamelModel


class XpTableEntryOut(CamelModel):
    level: int
    xp_required: int
    total_xp: int
    stat_points: int
    skill_points: int


class SkillEvolutionOut(CamelModel):
    points: int
    level: str
    label: str
    suffix: str
    max_points: int
    max_total_points: int
    icon: str | None = None


class XpBetweenOut(CamelModel):
    from_level: int
    to_level: int
    xp_required: int
    next_level_xp: int


class ClassInfoOut(CamelModel):
    id: CharacterClass
    name: str
    description: str
    primary_stat: str
    secondary_stat: str
    color: str
    image: str
    scaling: dict[str, dict[str, float]] | None = None
