# src/epitome_codex/game/stats.py
"""Derived combat stats for a class, level and stat point allocation.

A projection starts from a fixed baseline, adds flat growth once per level and
then adds ``points * multiplier`` for every entry of the class scaling table.
All arithmetic is done in :class:`~decimal.Decimal` so that the final
two-decimal rounding (half-up) is exact and reproducible.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from epitome_codex.core.errors import InvalidArgument

from .classes import CharacterClass

STAT_POINT_NAMES: Final[tuple[str, ...]] = ("vig", "int", "str", "dex")
STAT_POINTS_PER_LEVEL: Final[int] = 5
MAX_LEVEL: Final[int] = 100

_CENT: Final[Decimal] = Decimal("0.01")


@dataclass(frozen=True)
class StatAllocation:
    """Points a player distributed over the four attributes.

    ``int`` and ``str`` are stored as ``int_`` and ``str_``; use
    :meth:`from_mapping` / :meth:`points` to work with the public names.
    """

    vig: int = 0
    int_: int = 0
    str_: int = 0
    dex: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, int] | None) -> StatAllocation:
        """Build an allocation from ``{"vig": .., "int": .., "str": .., "dex": ..}``.

        Missing keys count as zero and unknown keys are ignored, matching how
        stored builds carry partial allocations.
        """
        data = data or {}
        return cls(
            vig=int(data.get("vig", 0)),
            int_=int(data.get("int", 0)),
            str_=int(data.get("str", 0)),
            dex=int(data.get("dex", 0)),
        )

    def points(self) -> dict[str, int]:
        """Return the allocation keyed by public attribute name."""
        return {"vig": self.vig, "int": self.int_, "str": self.str_, "dex": self.dex}

    @property
    def total(self) -> int:
        return self.vig + self.int_ + self.str_ + self.dex


@dataclass(frozen=True)
class DerivedStats:
    """Nine combat statistics produced by :func:`project`."""

    hp: float
    mp: float
    attack: float
    magic_attack: float
    defense: float
    crit_rate: float
    crit_damage: float
    attack_speed: float
    move_speed: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


BASE_STATS: Final[Mapping[str, Decimal]] = {
    "hp": Decimal(100),
    "mp": Decimal(50),
    "attack": Decimal(10),
    "magic_attack": Decimal(10),
    "defense": Decimal(5),
    "crit_rate": Decimal(5),
    "crit_damage": Decimal(150),
    "attack_speed": Decimal(100),
    "move_speed": Decimal(100),
}

# Flat growth applied once per level (level 1 already adds one unit).
LEVEL_GROWTH: Final[Mapping[str, Decimal]] = {
    "hp": Decimal(10),
    "mp": Decimal(5),
    "attack": Decimal(2),
    "magic_attack": Decimal(2),
    "defense": Decimal(1),
}

# class -> allocation point -> derived stat -> per-point multiplier
CLASS_STAT_SCALING: Final[Mapping[CharacterClass, Mapping[str, Mapping[str, Decimal]]]] = {
    CharacterClass.WARRIOR: {
        "vig": {"hp": Decimal("15"), "defense": Decimal("1.5")},
        "int": {"magic_attack": Decimal("0.5"), "mp": Decimal("2")},
        "str": {"attack": Decimal("3.0"), "crit_damage": Decimal("0.5")},
        "dex": {"crit_rate": Decimal("0.15"), "attack_speed": Decimal("0.8")},
    },
    CharacterClass.NINJA: {
        "vig": {"hp": Decimal("10"), "defense": Decimal("0.8")},
        "int": {"magic_attack": Decimal("0.3"), "mp": Decimal("1.5")},
        "str": {"attack": Decimal("1.5"), "crit_damage": Decimal("0.3")},
        "dex": {
            "attack": Decimal("2.5"),
            "crit_rate": Decimal("0.25"),
            "attack_speed": Decimal("1.2"),
        },
    },
    CharacterClass.SHAMAN: {
        "vig": {"hp": Decimal("10"), "defense": Decimal("0.8")},
        "int": {"magic_attack": Decimal("3.0"), "mp": Decimal("5")},
        "str": {"attack": Decimal("0.5")},
        "dex": {"crit_rate": Decimal("0.1"), "attack_speed": Decimal("0.5")},
    },
    CharacterClass.NECROMANCER: {
        "vig": {"hp": Decimal("8"), "defense": Decimal("0.6")},
        "int": {"magic_attack": Decimal("2.5"), "mp": Decimal("6")},
        "str": {"attack": Decimal("0.3")},
        "dex": {"crit_rate": Decimal("0.12"), "attack_speed": Decimal("0.4")},
    },
}


def _round(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def _validate(level: int, allocation: StatAllocation) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgument(f"Level must be an integer, got {level!r}")
    if level < 1:
        raise InvalidArgument(f"Level must be at least 1, got {level}")
    for name, points in allocation.points().items():
        if points < 0:
            raise InvalidArgument(f"Stat point '{name}' cannot be negative, got {points}")


def project(
    character_class: CharacterClass | str,
    level: int,
    allocation: StatAllocation,
) -> DerivedStats:
    """Compute derived stats for a class at ``level`` with ``allocation``.

    Args:
        character_class: Class enumerator or its name.
        level: Character level, 1 or higher.
        allocation: Non-negative points per attribute.

    Returns:
        Fresh :class:`DerivedStats`, every field rounded half-up to two decimals.

    Raises:
        InvalidArgument: For an unknown class, a level below 1 or a negative point.
    """
    klass = CharacterClass.parse(character_class)
    _validate(level, allocation)

    totals = dict(BASE_STATS)
    for stat, growth in LEVEL_GROWTH.items():
        totals[stat] += growth * level

    scaling = CLASS_STAT_SCALING[klass]
    for point_name, points in allocation.points().items():
        for stat, multiplier in scaling.get(point_name, {}).items():
            totals[stat] += multiplier * points

    return DerivedStats(**{stat: _round(value) for stat, value in totals.items()})


def total_stat_points(level: int) -> int:
    """Return how many attribute points a character has earned by ``level``."""
    if level < 1:
        return 0
    return level * STAT_POINTS_PER_LEVEL


def remaining_stat_points(level: int, allocation: StatAllocation) -> int:
    """Return unspent points; negative when the allocation is over budget."""
    return total_stat_points(level) - allocation.total


def scaling_table(character_class: CharacterClass | str) -> dict[str, dict[str, float]]:
    """Return the class scaling table with plain floats, for serialization."""
    klass = CharacterClass.parse(character_class)
    return {
        point: {stat: float(multiplier) for stat, multiplier in entries.items()}
        for point, entries in CLASS_STAT_SCALING[klass].items()
    }
