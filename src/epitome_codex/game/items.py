# src/epitome_codex/game/items.py
"""Item categories as stored in the wiki."""

from __future__ import annotations

from typing import Final

# Ascending; the wiki lists the rarest items first.
RARITIES: Final[tuple[str, ...]] = (
    "COMMON",
    "UNCOMMON",
    "RARE",
    "EPIC",
    "LEGENDARY",
    "MYTHIC",
)

ITEM_TYPES: Final[tuple[str, ...]] = (
    "WEAPON",
    "HELMET",
    "ARMOR",
    "GLOVES",
    "BOOTS",
    "SHIELD",
    "NECKLACE",
    "EARRING",
    "RING",
    "CONSUMABLE",
    "MATERIAL",
    "QUEST",
    "MISC",
)

