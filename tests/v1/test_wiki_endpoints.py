# tests/v1/test_wiki_endpoints.py
"""Tests for item and mob wiki endpoints."""

import pytest
from fastapi import status

from epitome_codex.models import Item, Mob


@pytest.fixture()
def dragon_slayer(db_session) -> Item:
    item = Item(
        name="Dragon Slayer",
        slug="dragon-slayer",
        type="WEAPON",
        rarity="EPIC",
        level=50,
        stats={"attack": 130},
        drop_sources=[{"mobName": "Elder Dragon", "dropRate": 0.5}],
    )
    db_session.add(item)
    db_session.flush()
    return item


def test_list_items(client, dragon_slayer) -> None:
    response = client.get("/api/v1/items/", params={"type": "WEAPON", "isGear": True})

    assert response.status_code == status.HTTP_200_OK
    [item] = response.json()
    assert item["slug"] == "dragon-slayer"
    assert item["stats"] == {"attack": 130}
    assert "dropSources" not in item


def test_list_items_unknown_rarity(client) -> None:
    response = client.get("/api/v1/items/", params={"rarity": "SHINY"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_item_detail(client, dragon_slayer) -> None:
    response = client.get("/api/v1/items/dragon-slayer")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["dropSources"] == [{"mobName": "Elder Dragon", "dropRate": 0.5}]
    assert data["craftRecipe"] is None


def test_get_item_missing(client) -> None:
    response = client.get("/api/v1/items/excalibur")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Item not found"


def test_list_mobs(client, db_session) -> None:
    db_session.add_all(
        [
            Mob(name="Forest Wolf", slug="forest-wolf", level=5, mob_type="NORMAL"),
            Mob(name="Bandit Chief", slug="bandit-chief", level=25, mob_type="BOSS"),
        ]
    )
    db_session.flush()

    response = client.get("/api/v1/mobs/", params={"mobType": "BOSS", "minLevel": 20})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [mob["name"] for mob in data["mobs"]] == ["Bandit Chief"]
    assert data["total"] == 1
    assert data["hasMore"] is False


def test_get_mob(client, db_session) -> None:
    db_session.add(Mob(name="Cave Spider", slug="cave-spider", level=12, xp_reward=120))
    db_session.flush()

    response = client.get("/api/v1/mobs/cave-spider")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["xpReward"] == 120
    assert client.get("/api/v1/mobs/nope").status_code == status.HTTP_404_NOT_FOUND
