# tests/services/test_wiki.py
"""Tests for item and mob wiki queries."""

import pytest

from epitome_codex.core.errors import InvalidArgument, NotFound
from epitome_codex.models import Item, Mob
from epitome_codex.services import wiki


@pytest.fixture()
def items(db_session):
    rows = [
        Item(name="Iron Sword", slug="iron-sword", type="WEAPON", rarity="COMMON", level=10),
        Item(name="Abyssal Edge", slug="abyssal-edge", type="WEAPON", rarity="LEGENDARY", level=70),
        Item(name="Mithril Sword", slug="mithril-sword", type="WEAPON", rarity="RARE", level=35),
        Item(name="Tower Shield", slug="tower-shield", type="SHIELD", rarity="RARE", level=40),
        Item(name="Lucky Clover", slug="lucky-clover", type="MATERIAL", rarity="EPIC", is_gear=False),
    ]
    db_session.add_all(rows)
    db_session.flush()
    return rows


@pytest.fixture()
def mobs(db_session):
    rows = [
        Mob(name="Forest Wolf", slug="forest-wolf", level=5, category="BEAST", biome="Forest"),
        Mob(name="Cave Spider", slug="cave-spider", level=12, category="INSECT", biome="Caves"),
        Mob(name="Dire Wolf", slug="dire-wolf", level=30, category="BEAST", biome="Forest"),
        Mob(name="Ghost Wolf", slug="ghost-wolf", level=20, category="BEAST", is_active=False),
    ]
    db_session.add_all(rows)
    db_session.flush()
    return rows


def test_items_rarest_first(db_session, items) -> None:
    names = [item.name for item in wiki.list_items(db_session)]

    # RARE ties break on level, highest first.
    assert names == ["Abyssal Edge", "Lucky Clover", "Tower Shield", "Mithril Sword", "Iron Sword"]


def test_item_filters(db_session, items) -> None:
    weapons = wiki.list_items(db_session, item_type="WEAPON", rarity="RARE")
    assert [item.name for item in weapons] == ["Mithril Sword"]

    materials = wiki.list_items(db_session, is_gear=False)
    assert [item.name for item in materials] == ["Lucky Clover"]

    swords = wiki.list_items(db_session, search="sword", limit=1)
    assert [item.name for item in swords] == ["Mithril Sword"]


def test_get_item(db_session, items) -> None:
    assert wiki.get_item(db_session, "tower-shield").name == "Tower Shield"
    with pytest.raises(NotFound):
        wiki.get_item(db_session, "excalibur")


def test_mobs_by_level_without_inactive(db_session, mobs) -> None:
    page = wiki.list_mobs(db_session)

    assert [mob.name for mob in page.mobs] == ["Forest Wolf", "Cave Spider", "Dire Wolf"]
    assert page.total == 3


def test_mob_filters_and_paging(db_session, mobs) -> None:
    wolves = wiki.list_mobs(db_session, search="wolf", category="BEAST", biome="all")
    assert [mob.name for mob in wolves.mobs] == ["Forest Wolf", "Dire Wolf"]

    mid = wiki.list_mobs(db_session, min_level=10, max_level=30)
    assert [mob.name for mob in mid.mobs] == ["Cave Spider", "Dire Wolf"]

    first = wiki.list_mobs(db_session, limit=2)
    assert first.has_more is True
    rest = wiki.list_mobs(db_session, limit=2, offset=2)
    assert [mob.name for mob in rest.mobs] == ["Dire Wolf"]
    assert rest.has_more is False


def test_inactive_mob_is_hidden(db_session, mobs) -> None:
    assert wiki.get_mob(db_session, "cave-spider").level == 12
    with pytest.raises(NotFound):
        wiki.get_mob(db_session, "ghost-wolf")


def test_unknown_item_filters_rejected(db_session) -> None:
    with pytest.raises(InvalidArgument):
        wiki.list_items(db_session, rarity="SHINY")
    with pytest.raises(InvalidArgument):
        wiki.list_items(db_session, item_type="SPACESHIP")
