# tests/game/test_xp_table.py
"""Tests for the experience curve."""

from epitome_codex.game.xp_table import (
    XP_TABLE,
    get_entry,
    total_xp_for_level,
    xp_between_levels,
    xp_for_level,
)


def test_table_covers_levels_one_to_hundred() -> None:
    assert len(XP_TABLE) == 100
    assert XP_TABLE[0].level == 1
    assert XP_TABLE[-1].level == 100


def test_xp_curve_values() -> None:
    assert xp_for_level(1) == 100
    assert xp_for_level(2) == 565
    assert xp_for_level(3) == 1558
    assert total_xp_for_level(2) == 665


def test_skill_point_every_fifth_level() -> None:
    assert get_entry(5).skill_points == 1
    assert get_entry(6).skill_points == 0
    assert all(entry.stat_points == 5 for entry in XP_TABLE)


def test_out_of_range_levels() -> None:
    assert get_entry(0) is None
    assert xp_for_level(101) == 0
    assert total_xp_for_level(-3) == 0


def test_xp_between_levels() -> None:
    assert xp_between_levels(1, 2) == 565
    assert xp_between_levels(0, 2) == 665
    assert xp_between_levels(3, 3) == 0
    assert xp_between_levels(5, 2) == 0
