# src/epitome_codex/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .builds import router as builds_router
from .classes import router as classes_router
from .guides import router as guides_router
from .items import router as items_router
from .mobs import router as mobs_router
from .stats import router as stats_router
from .tools import router as tools_router
from .votes import router as votes_router

__all__ = [
    "admin_router",
    "builds_router",
    "classes_router",
    "guides_router",
    "items_router",
    "mobs_router",
    "stats_router",
    "tools_router",
    "votes_router",
]
