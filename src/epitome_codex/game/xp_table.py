# src/epitome_codex/game/xp_table.py
"""Experience curve for levels 1-100."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

from .stats import MAX_LEVEL, STAT_POINTS_PER_LEVEL

SKILL_POINT_INTERVAL: Final[int] = 5


@dataclass(frozen=True)
class XpTableEntry:
    level: int
    xp_required: int
    total_xp: int
    stat_points: int
    skill_points: int


def xp_to_next(level: int) -> int:
    """XP needed to clear ``level``: ``floor(100 * level ** 2.5)``."""
    return math.floor(100 * math.pow(level, 2.5))


def _build_table() -> tuple[XpTableEntry, ...]:
    entries = []
    running_total = 0
    for level in range(1, MAX_LEVEL + 1):
        xp_required = xp_to_next(level)
        running_total += xp_required
        entries.append(
            XpTableEntry(
                level=level,
                xp_required=xp_required,
                total_xp=running_total,
                stat_points=STAT_POINTS_PER_LEVEL,
                skill_points=1 if level % SKILL_POINT_INTERVAL == 0 else 0,
            )
        )
    return tuple(entries)


XP_TABLE: Final[tuple[XpTableEntry, ...]] = _build_table()


def get_entry(level: int) -> XpTableEntry | None:
    if level < 1 or level > MAX_LEVEL:
        return None
    return XP_TABLE[level - 1]


def xp_for_level(level: int) -> int:
    """Return the XP required at ``level``, or 0 outside 1..100."""
    entry = get_entry(level)
    return entry.xp_required if entry else 0


def total_xp_for_level(level: int) -> int:
    """Return cumulative XP through ``level``, or 0 outside 1..100."""
    entry = get_entry(level)
    return entry.total_xp if entry else 0


def xp_between_levels(from_level: int, to_level: int) -> int:
    """Return XP needed to go from ``from_level`` to ``to_level``."""
    if from_level >= to_level:
        return 0
    from_xp = total_xp_for_level(from_level) if from_level > 0 else 0
    return total_xp_for_level(to_level) - from_xp
