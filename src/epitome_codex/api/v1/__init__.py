# src/epitome_codex/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    builds_router,
    classes_router,
    guides_router,
    items_router,
    mobs_router,
    stats_router,
    tools_router,
    votes_router,
)

__all__ = [
    "builds_router",
    "votes_router",
    "stats_router",
    "classes_router",
    "tools_router",
    "guides_router",
    "items_router",
    "mobs_router",
    "admin_router",
]
