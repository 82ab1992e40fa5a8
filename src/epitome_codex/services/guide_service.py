"""Guide authoring and lookup by slug."""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sqlalchemy import or_, select, update
from sqlalchemy.orm import Session

from epitome_codex.core.errors import NotFound, PermissionDenied
from epitome_codex.models import Guide, User
from epitome_codex.schemas.guide import GuideCreate, GuideUpdate

__all__ = [
    "slugify",
    "list_guides",
    "get_guide",
    "create_guide",
    "update_guide",
    "delete_guide",
]

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 200

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Lowercase ``title`` and collapse everything but ``a-z0-9`` into dashes."""
    return _NON_SLUG.sub("-", title.lower()).strip("-") or "guide"


def _unique_slug(db: Session, title: str, exclude_id: str | None = None) -> str:
    base = slugify(title)
    slug = base
    counter = 1
    while True:
        stmt = select(Guide.id).where(Guide.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Guide.id != exclude_id)
        if db.scalar(stmt) is None:
            return slug
        slug = f"{base}-{counter}"
        counter += 1


def _can_manage(guide: Guide, user: User | None) -> bool:
    return user is not None and (guide.user_id == user.id or user.is_admin)


def list_guides(
    db: Session,
    *,
    viewer: User | None = None,
    category: str | None = None,
    search: str | None = None,
    featured: bool = False,
    user_id: str | None = None,
) -> Sequence[Guide]:
    """Return guides, featured first, then newest.

    Only published guides are listed, except that a signed-in author listing
    their own guides (``user_id`` equal to their id) also sees drafts.
    """
    conditions = []
    if user_id:
        conditions.append(Guide.user_id == user_id)
    if not (user_id and viewer is not None and viewer.id == user_id):
        conditions.append(Guide.is_published.is_(True))
    if category and category != "all":
        conditions.append(Guide.category == category)
    if search:
        conditions.append(
            or_(
                Guide.title.contains(search, autoescape=True),
                Guide.excerpt.contains(search, autoescape=True),
            )
        )
    if featured:
        conditions.append(Guide.is_featured.is_(True))

    stmt = (
        select(Guide)
        .where(*conditions)
        .order_by(Guide.is_featured.desc(), Guide.created_at.desc())
    )
    return db.scalars(stmt).all()


def get_guide(db: Session, slug: str, viewer: User | None = None) -> Guide:
    """Return a guide and count the view.

    Drafts are only visible to their author and admins.

    Raises:
        NotFound: If no visible guide has that slug.
    """
    guide = db.scalar(select(Guide).where(Guide.slug == slug))
    if guide is None or (not guide.is_published and not _can_manage(guide, viewer)):
        raise NotFound("Guide not found")

    db.execute(
        update(Guide)
        .where(Guide.id == guide.id)
        .values(view_count=Guide.view_count + 1)
        .execution_options(synchronize_session="fetch")
    )
    db.commit()
    db.refresh(guide)
    return guide


def _default_excerpt(content: str) -> str:
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH] + "..."


def create_guide(db: Session, user: User, payload: GuideCreate) -> Guide:
    """Persist a new guide authored by ``user`` under a fresh slug."""
    guide = Guide(
        title=payload.title,
        slug=_unique_slug(db, payload.title),
        content=payload.content,
        excerpt=payload.excerpt or _default_excerpt(payload.content),
        category=payload.category,
        is_published=payload.is_published,
        user_id=user.id,
    )
    db.add(guide)
    db.commit()
    db.refresh(guide)
    logger.info("User %s created guide %s", user.id, guide.slug)
    return guide


def _get_managed_guide(db: Session, user: User, slug: str) -> Guide:
    guide = db.scalar(select(Guide).where(Guide.slug == slug))
    if guide is None:
        raise NotFound("Guide not found")
    if not _can_manage(guide, user):
        raise PermissionDenied("Forbidden")
    return guide


def update_guide(db: Session, user: User, slug: str, payload: GuideUpdate) -> Guide:
    """Apply partial updates; a new title also moves the guide to a new slug.

    Raises:
        NotFound: If the guide does not exist.
        PermissionDenied: If ``user`` is neither the author nor an admin.
    """
    guide = _get_managed_guide(db, user, slug)

    for key in payload.model_fields_set:
        value = getattr(payload, key)
        if value is None and key not in {"excerpt", "meta_title", "meta_description"}:
            continue
        if key == "title" and value != guide.title:
            guide.slug = _unique_slug(db, value, exclude_id=guide.id)
        setattr(guide, key, value)

    db.commit()
    db.refresh(guide)
    logger.info("Guide %s updated by %s", guide.slug, user.id)
    return guide


def delete_guide(db: Session, user: User, slug: str) -> None:
    """Remove a guide.

    Raises:
        NotFound: If the guide does not exist.
        PermissionDenied: If ``user`` is neither the author nor an admin.
    """
    guide = _get_managed_guide(db, user, slug)
    db.delete(guide)
    db.commit()
    logger.info("Guide %s deleted by %s", slug, user.id)
