# src/epitome_codex/api/v1/endpoints/classes.py
"""Character class reference endpoints."""

from fastapi import APIRouter

from epitome_codex.core.errors import CodexError, NotFound
from epitome_codex.game.classes import CHARACTER_CLASSES, CharacterClass
from epitome_codex.game.stats import scaling_table
from epitome_codex.schemas.tools import ClassInfoOut

from ..dependencies import http_error

router = APIRouter(prefix="/classes", tags=["classes"])


def _class_out(character_class: CharacterClass, *, with_scaling: bool) -> ClassInfoOut:
    info = CHARACTER_CLASSES[character_class]
    return ClassInfoOut(
        id=character_class,
        name=info.name,
        description=info.description,
        primary_stat=info.primary_stat,
        secondary_stat=info.secondary_stat,
        color=info.color,
        image=info.image,
        scaling=scaling_table(character_class) if with_scaling else None,
    )


@router.get("/", response_model=list[ClassInfoOut])
async def list_classes() -> list[ClassInfoOut]:
    """List all playable classes."""
    return [_class_out(klass, with_scaling=False) for klass in CharacterClass]


@router.get("/{class_id}", response_model=ClassInfoOut)
async def get_class(class_id: str) -> ClassInfoOut:
    """Return one class with its stat scaling table."""
    try:
        klass = CharacterClass.parse(class_id)
    except CodexError as err:
        raise http_error(NotFound("Class not found")) from err
    return _class_out(klass, with_scaling=True)
