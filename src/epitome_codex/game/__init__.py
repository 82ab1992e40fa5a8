# src/epitome_codex/game/__init__.py
"""Static game rules: classes, stat scaling, XP curve and skill tiers."""

from .classes import CHARACTER_CLASSES, CharacterClass, ClassInfo
from .stats import (
    BASE_STATS,
    CLASS_STAT_SCALING,
    DerivedStats,
    StatAllocation,
    project,
)

__all__ = [
    "BASE_STATS",
    "CHARACTER_CLASSES",
    "CLASS_STAT_SCALING",
    "CharacterClass",
    "ClassInfo",
    "DerivedStats",
    "StatAllocation",
    "project",
]
