# src/epitome_codex/models/__init__.py
"""SQLAlchemy models for the Epitome Codex application."""

from .build import Build
from .guide import Guide
from .item import Item
from .mob import Mob
from .user import User
from .vote import BuildVote

__all__ = [
    "Build",
    "BuildVote",
    "Guide",
    "Item",
    "Mob",
    "User",
]
