"""Seed the configured database with a demo account and sample builds.

Safe to run repeatedly: rows are looked up by their natural keys first.
"""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from epitome_codex.db.session import SessionLocal, create_tables
from epitome_codex.models import Build, Guide, Item, Mob, User
from epitome_codex.services.guide_service import slugify

logger = logging.getLogger(__name__)

DEMO_USERNAME = "codex-demo"

SAMPLE_BUILDS = [
    {
        "title": "Tank Warrior (Mass War)",
        "character_class": "WARRIOR",
        "level": 20,
        "tags": ["PvP", "Mass War"],
        "stats_allocation": {"vig": 60, "int": 0, "str": 30, "dex": 10},
    },
    {
        "title": "Crit Ninja",
        "character_class": "NINJA",
        "level": 20,
        "tags": ["PvP", "1v1"],
        "stats_allocation": {"vig": 20, "int": 0, "str": 20, "dex": 60},
    },
    {
        "title": "Support Shaman",
        "character_class": "SHAMAN",
        "level": 15,
        "tags": ["PvE", "Leveling"],
        "stats_allocation": {"vig": 25, "int": 50, "str": 0, "dex": 0},
    },
    {
        "title": "Farming Necromancer",
        "character_class": "NECROMANCER",
        "level": 18,
        "tags": ["PvE", "Farming"],
        "stats_allocation": {"vig": 20, "int": 70, "str": 0, "dex": 0},
    },
]


SAMPLE_ITEMS = [
    {"name": "Iron Helmet", "type": "HELMET", "rarity": "COMMON", "level": 10, "stats": {"defense": 15, "hp": 50}},
    {"name": "Steel Helmet", "type": "HELMET", "rarity": "UNCOMMON", "level": 20, "stats": {"defense": 30, "hp": 100}},
    {"name": "Dragon Helmet", "type": "HELMET", "rarity": "EPIC", "level": 50, "stats": {"defense": 80, "hp": 350}},
    {"name": "Abyssal Crown", "type": "HELMET", "rarity": "LEGENDARY", "level": 70, "stats": {"defense": 120, "hp": 500}},
    {"name": "Iron Sword", "type": "WEAPON", "rarity": "COMMON", "level": 10, "stats": {"attack": 25}},
    {"name": "Mithril Sword", "type": "WEAPON", "rarity": "RARE", "level": 35, "stats": {"attack": 85}},
    {"name": "Abyssal Edge", "type": "WEAPON", "rarity": "LEGENDARY", "level": 70, "stats": {"attack": 200}},
    {"name": "Leather Boots", "type": "BOOTS", "rarity": "COMMON", "level": 10, "stats": {"defense": 8, "moveSpeed": 5}},
    {"name": "Tower Shield", "type": "SHIELD", "rarity": "RARE", "level": 35, "stats": {"defense": 70, "blockRate": 12}},
    {"name": "Gold Necklace", "type": "NECKLACE", "rarity": "RARE", "level": 35, "stats": {"hp": 180, "mp": 100}},
]

SAMPLE_MOBS = [
    {"name": "Forest Wolf", "level": 5, "xp_reward": 40, "mob_type": "NORMAL", "category": "BEAST", "biome": "Forest"},
    {"name": "Cave Spider", "level": 12, "xp_reward": 120, "mob_type": "NORMAL", "category": "INSECT", "biome": "Caves"},
    {"name": "Bandit Chief", "level": 25, "xp_reward": 900, "mob_type": "BOSS", "category": "HUMANOID", "biome": "Desert"},
]

SAMPLE_GUIDE = {
    "title": "Getting Started in Epitome",
    "category": "beginner",
    "content": "Pick a class, spend your first stat points on your primary stat, "
    "and keep a few points in vigor while leveling.",
}

def seed_demo_user(db: Session) -> User:
    """Return the demo user, creating it if missing."""
    user = db.scalar(select(User).where(User.username == DEMO_USERNAME))
    if user is None:
        user = User(name="Codex Demo", username=DEMO_USERNAME)
        db.add(user)
        db.flush()
        logger.info("Created demo user %s", user.id)
    return user


def seed_builds(db: Session, owner: User) -> int:
    """Insert sample builds not yet present; return how many were added."""
    added = 0
    for data in SAMPLE_BUILDS:
        exists = db.scalar(select(Build.id).where(Build.title == data["title"]))
        if exists:
            continue
        db.add(Build(user_id=owner.id, **data))
        added += 1
    return added


def seed_items(db: Session) -> int:
    """Insert sample items by slug; return how many were added."""
    added = 0
    for data in SAMPLE_ITEMS:
        slug = slugify(data["name"])
        if db.scalar(select(Item.id).where(Item.slug == slug)):
            continue
        db.add(Item(slug=slug, required_level=data["level"], **data))
        added += 1
    return added


def seed_mobs(db: Session) -> int:
    """Insert sample mobs by slug; return how many were added."""
    added = 0
    for data in SAMPLE_MOBS:
        slug = slugify(data["name"])
        if db.scalar(select(Mob.id).where(Mob.slug == slug)):
            continue
        db.add(Mob(slug=slug, **data))
        added += 1
    return added


def seed_guide(db: Session, author: User) -> bool:
    """Publish the starter guide unless it already exists."""
    slug = slugify(SAMPLE_GUIDE["title"])
    if db.scalar(select(Guide.id).where(Guide.slug == slug)):
        return False
    db.add(
        Guide(
            slug=slug,
            excerpt=SAMPLE_GUIDE["content"],
            is_published=True,
            is_featured=True,
            user_id=author.id,
            **SAMPLE_GUIDE,
        )
    )
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    create_tables()
    with SessionLocal() as db:
        owner = seed_demo_user(db)
        added = seed_builds(db, owner)
        items = seed_items(db)
        mobs = seed_mobs(db)
        guide = seed_guide(db, owner)
        db.commit()
    logger.info(
        "Seeding complete (%d builds, %d items, %d mobs, guide added: %s)",
        added,
        items,
        mobs,
        guide,
    )


if __name__ == "__main__":
    main()
