"""CRUD-style helpers for community builds."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from epitome_codex.core.errors import InvalidArgument, NotFound, PermissionDenied
from epitome_codex.game.classes import CharacterClass
from epitome_codex.game.skills import validate_skill_points
from epitome_codex.game.stats import DerivedStats, StatAllocation, project
from epitome_codex.models import Build, BuildVote, User
from epitome_codex.schemas.build import BuildCreate, BuildModeration, BuildUpdate

__all__ = [
    "BuildPage",
    "SORT_OPTIONS",
    "list_builds",
    "get_build",
    "create_build",
    "update_build",
    "delete_build",
    "project_build",
    "admin_list_builds",
    "moderate_build",
]

logger = logging.getLogger(__name__)

SORT_OPTIONS = {
    "newest": Build.created_at.desc(),
    "oldest": Build.created_at.asc(),
    "popular": Build.upvotes.desc(),
    "level": Build.level.desc(),
}

# Fields a client may explicitly clear with null.
_NULLABLE_FIELDS = frozenset({"description", "guide", "equipment", "skill_path"})


@dataclass(frozen=True)
class BuildPage:
    builds: Sequence[Build]
    total: int
    has_more: bool


def list_builds(
    db: Session,
    *,
    character_class: str | None = None,
    tag: str | None = None,
    search: str | None = None,
    sort: str = "newest",
    limit: int = 50,
    offset: int = 0,
) -> BuildPage:
    """Return published builds matching the filters.

    ``"all"`` for class or tag means no filter. Tags are stored as a JSON list,
    so tag matching happens after the query, as does the page slice when a
    tag filter is present.
    """
    if sort not in SORT_OPTIONS:
        raise InvalidArgument(f"Unknown sort order: {sort!r}")
    if limit < 1 or offset < 0:
        raise InvalidArgument("limit must be positive and offset non-negative")

    conditions = [Build.is_published.is_(True)]
    if character_class and character_class != "all":
        conditions.append(Build.character_class == CharacterClass.parse(character_class).value)
    if search:
        conditions.append(Build.title.contains(search, autoescape=True))

    stmt = select(Build).where(*conditions).order_by(SORT_OPTIONS[sort])

    if tag and tag != "all":
        matching = [build for build in db.scalars(stmt) if tag in (build.tags or [])]
        page = matching[offset:offset + limit]
        return BuildPage(builds=page, total=len(matching), has_more=offset + len(page) < len(matching))

    total = db.scalar(select(func.count()).select_from(Build).where(*conditions)) or 0
    builds = db.scalars(stmt.limit(limit).offset(offset)).all()
    return BuildPage(builds=builds, total=total, has_more=offset + len(builds) < total)


def get_build(db: Session, build_id: str) -> Build:
    """Return a build by id.

    Raises:
        NotFound: If no build has that id.
    """
    build = db.get(Build, build_id)
    if build is None:
        raise NotFound("Build not found")
    return build


def _ensure_owner(build: Build, user: User | None) -> None:
    if user is not None and user.is_admin:
        return
    # Builds without an owner (seeded content) are editable by anyone signed in.
    if build.user_id and (user is None or build.user_id != user.id):
        raise PermissionDenied()


def _check_updated_stats(build: Build, payload: BuildUpdate) -> None:
    """Run the stat rules on the build as it would look after ``payload``."""
    character_class = payload.character_class or build.character_class
    level = payload.level if payload.level is not None else build.level
    if payload.stats_allocation is not None:
        allocation = payload.stats_allocation.to_allocation()
    else:
        allocation = StatAllocation.from_mapping(build.stats_allocation)
    project(character_class, level, allocation)
    if payload.skill_points is not None:
        validate_skill_points(payload.skill_points)


def create_build(db: Session, user: User, payload: BuildCreate) -> Build:
    """Persist a new build owned by ``user``.

    Raises:
        InvalidArgument: If the level, allocation or skill points are out of range.
    """
    project(payload.character_class, payload.level, payload.stats_allocation.to_allocation())
    validate_skill_points(payload.skill_points)
    build = Build(
        title=payload.title,
        description=payload.description,
        guide=payload.guide,
        character_class=payload.character_class.value,
        level=payload.level,
        tags=list(payload.tags),
        stats_allocation=payload.stats_allocation.to_points(),
        equipment=payload.equipment,
        skill_points=dict(payload.skill_points),
        skill_path=payload.skill_path or None,
        is_published=payload.is_published,
        user_id=user.id,
    )
    db.add(build)
    db.commit()
    db.refresh(build)
    logger.info("User %s created build %s (%s)", user.id, build.id, build.character_class)
    return build


def update_build(db: Session, user: User | None, build_id: str, payload: BuildUpdate) -> Build:
    """Apply partial updates to a build owned by ``user``.

    Raises:
        NotFound: If the build does not exist.
        PermissionDenied: If the build belongs to someone else.
    """
    build = get_build(db, build_id)
    _ensure_owner(build, user)
    _check_updated_stats(build, payload)

    for key in payload.model_fields_set:
        value = getattr(payload, key)
        if value is None and key not in _NULLABLE_FIELDS:
            continue
        if key == "character_class":
            value = value.value
        elif key == "stats_allocation":
            value = value.to_points()
        elif key == "skill_path":
            value = value or None
        setattr(build, key, value)

    db.add(build)
    db.commit()
    db.refresh(build)
    logger.info("Build %s updated", build.id)
    return build


def delete_build(db: Session, user: User | None, build_id: str) -> None:
    """Remove a build and its votes.

    Raises:
        NotFound: If the build does not exist.
        PermissionDenied: If the build belongs to someone else.
    """
    build = get_build(db, build_id)
    _ensure_owner(build, user)
    db.execute(delete(BuildVote).where(BuildVote.build_id == build_id))
    db.delete(build)
    db.commit()
    logger.info("Build %s deleted", build_id)


def project_build(build: Build) -> DerivedStats:
    """Project the stored allocation of ``build`` into derived stats."""
    allocation = StatAllocation.from_mapping(build.stats_allocation)
    return project(build.character_class, build.level, allocation)


ADMIN_STATUS_FILTERS = {
    "published": True,
    "draft": False,
}


def admin_list_builds(
    db: Session,
    *,
    search: str | None = None,
    status: str | None = None,
    character_class: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> BuildPage:
    """Return all builds, drafts included, newest first.

    ``status`` is ``"published"``, ``"draft"`` or anything else for both.
    """
    if limit < 1 or offset < 0:
        raise InvalidArgument("limit must be positive and offset non-negative")

    conditions = []
    if search:
        conditions.append(Build.title.contains(search, autoescape=True))
    if status in ADMIN_STATUS_FILTERS:
        conditions.append(Build.is_published.is_(ADMIN_STATUS_FILTERS[status]))
    if character_class and character_class != "all":
        conditions.append(Build.character_class == CharacterClass.parse(character_class).value)

    total = db.scalar(select(func.count()).select_from(Build).where(*conditions)) or 0
    builds = db.scalars(
        select(Build)
        .where(*conditions)
        .order_by(Build.created_at.desc())
        .limit(limit)
        .offset(offset)
    ).all()
    return BuildPage(builds=builds, total=total, has_more=offset + len(builds) < total)


def moderate_build(db: Session, admin: User, build_id: str, payload: BuildModeration) -> Build:
    """Publish, unpublish or retitle any build.

    Raises:
        NotFound: If the build does not exist.
        PermissionDenied: If ``admin`` is not an admin.
    """
    if not admin.is_admin:
        raise PermissionDenied("Forbidden")
    build = get_build(db, build_id)

    if payload.is_published is not None:
        build.is_published = payload.is_published
    if payload.title:
        build.title = payload.title
    if "description" in payload.model_fields_set:
        build.description = payload.description

    db.commit()
    db.refresh(build)
    logger.info("Admin %s moderated build %s (published=%s)", admin.id, build.id, build.is_published)
    return build
