# src/epitome_codex/schemas/guide.py
"""Guide-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .build import BuildAuthor
from .common import CamelModel


class GuideCreate(CamelModel):
    """Schema for writing a new guide; drafts by default."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, description="Markdown body")
    excerpt: str | None = None
    category: str = Field(..., min_length=1, max_length=64)
    is_published: bool = False


class GuideUpdate(CamelModel):
    """Partial update; omitted fields are left untouched."""

    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    category: str | None = Field(None, min_length=1, max_length=64)
    is_published: bool | None = None
    meta_title: str | None = None
    meta_description: str | None = None


class GuideResponse(CamelModel):
    id: str
    title: str
    slug: str
    content: str
    excerpt: str | None
    category: str
    is_published: bool
    is_featured: bool
    view_count: int
    meta_title: str | None
    meta_description: str | None
    user_id: str | None
    user: BuildAuthor | None = None
    created_at: datetime
    updated_at: datetime
