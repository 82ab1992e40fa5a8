# src/epitome_codex/game/classes.py
"""Playable character classes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from epitome_codex.core.errors import InvalidArgument


class CharacterClass(str, Enum):
    """Closed set of playable classes, stored by name in the database."""

    WARRIOR = "WARRIOR"
    NINJA = "NINJA"
    SHAMAN = "SHAMAN"
    NECROMANCER = "NECROMANCER"

    @classmethod
    def parse(cls, value: str | CharacterClass) -> CharacterClass:
        """Return the class named by ``value`` (case-insensitive).

        Raises:
            InvalidArgument: If ``value`` names no class.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as err:
            raise InvalidArgument(f"Unknown character class: {value!r}") from err


@dataclass(frozen=True)
class ClassInfo:
    """Display metadata for a class."""

    name: str
    description: str
    primary_stat: str
    secondary_stat: str
    color: str
    image: str


CHARACTER_CLASSES: dict[CharacterClass, ClassInfo] = {
    CharacterClass.WARRIOR: ClassInfo(
        name="Warrior",
        description="Frontline melee fighter with high defense and powerful attacks.",
        primary_stat="STR",
        secondary_stat="CON",
        color="#dc2626",
        image="/game-images/classess/warrior.png",
    ),
    CharacterClass.NINJA: ClassInfo(
        name="Ninja",
        description="Agile assassin specializing in quick strikes and evasion.",
        primary_stat="DEX",
        secondary_stat="STR",
        color="#16a34a",
        image="/game-images/classess/ninja.png",
    ),
    CharacterClass.SHAMAN: ClassInfo(
        name="Shaman",
        description="Versatile spellcaster with healing and elemental abilities.",
        primary_stat="INT",
        secondary_stat="WIS",
        color="#2563eb",
        image="/game-images/classess/shaman.png",
    ),
    CharacterClass.NECROMANCER: ClassInfo(
        name="Necromancer",
        description="Dark mage commanding undead minions and draining life force.",
        primary_stat="INT",
        secondary_stat="WIS",
        color="#7c3aed",
        image="/game-images/classess/necromancer.png",
    ),
}
