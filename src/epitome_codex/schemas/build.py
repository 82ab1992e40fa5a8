# src/epitome_codex/schemas/build.py
"""Build-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from epitome_codex.game.classes import CharacterClass

from .common import CamelModel
from .stats import StatAllocationIn


class BuildAuthor(CamelModel):
    id: str
    name: str | None = None
    username: str | None = None
    image: str | None = None


class BuildCreate(CamelModel):
    """Schema for creating a new build."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    guide: str | None = Field(None, description="Markdown guide")
    character_class: CharacterClass = Field(..., alias="class")
    level: int = 1
    tags: list[str] = Field(default_factory=list)
    stats_allocation: StatAllocationIn = Field(default_factory=StatAllocationIn)
    equipment: dict[str, Any] | None = None
    skill_points: dict[str, int] = Field(default_factory=dict)
    skill_path: str | None = None
    is_published: bool = True


class BuildUpdate(CamelModel):
    """Partial update; omitted fields are left untouched."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    guide: str | None = None
    character_class: CharacterClass | None = Field(None, alias="class")
    level: int | None = None
    tags: list[str] | None = None
    stats_allocation: StatAllocationIn | None = None
    equipment: dict[str, Any] | None = None
    skill_points: dict[str, int] | None = None
    skill_path: str | None = None
    is_published: bool | None = None


class BuildResponse(CamelModel):
    """Schema for build information returned by the API."""

    id: str
    title: str
    description: str | None
    guide: str | None
    character_class: str = Field(..., alias="class")
    level: int
    tags: list[str]
    stats_allocation: dict[str, int]
    equipment: dict[str, Any] | None
    skill_points: dict[str, int]
    skill_path: str | None
    is_published: bool
    upvotes: int
    downvotes: int
    user_id: str | None
    user: BuildAuthor | None = None
    created_at: datetime
    updated_at: datetime


class BuildListResponse(CamelModel):
    builds: list[BuildResponse]
    total: int
    has_more: bool


class BuildModeration(CamelModel):
    """Fields an admin may change on any build."""

    is_published: bool | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
