# src/epitome_codex/schemas/stats.py
"""Stat planner schemas."""

from pydantic import Field

from epitome_codex.game.classes import CharacterClass
from epitome_codex.game.stats import DerivedStats, StatAllocation

from .common import CamelModel


class StatAllocationIn(CamelModel):
    """Points per attribute; ranges are checked by the stat rules, not here."""

    vig: int = 0
    int_: int = Field(default=0, alias="int")
    str_: int = Field(default=0, alias="str")
    dex: int = 0

    def to_allocation(self) -> StatAllocation:
        return StatAllocation(vig=self.vig, int_=self.int_, str_=self.str_, dex=self.dex)

    def to_points(self) -> dict[str, int]:
        return self.to_allocation().points()


class DerivedStatsOut(CamelModel):
    hp: float
    mp: float
    attack: float
    magic_attack: float
    defense: float
    crit_rate: float
    crit_damage: float
    attack_speed: float
    move_speed: float

    @classmethod
    def from_stats(cls, stats: DerivedStats) -> "DerivedStatsOut":
        return cls(**stats.as_dict())


class ProjectionRequest(CamelModel):
    character_class: CharacterClass = Field(..., alias="class")
    level: int = 1
    allocation: StatAllocationIn = Field(default_factory=StatAllocationIn)


class ProjectionResponse(CamelModel):
    character_class: CharacterClass = Field(..., alias="class")
    level: int
    stats: DerivedStatsOut
    total_points: int
    allocated_points: int
    remaining_points: int
