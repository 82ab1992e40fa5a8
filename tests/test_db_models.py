"""Unit tests for the ORM mappings in epitome_codex.models.

These check table names, the reserved ``class`` column and the vote
constraints without touching a database.
"""

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlalchemy.orm import attributes

from epitome_codex.models import Build, BuildVote, Guide, Item, Mob, User


def test_table_names():
    assert User.__tablename__ == "user_account"
    assert Build.__tablename__ == "build"
    assert BuildVote.__tablename__ == "build_vote"
    assert Guide.__tablename__ == "guide"
    assert Item.__tablename__ == "item"
    assert Mob.__tablename__ == "mob"


def test_class_column_is_mapped_to_character_class():
    """The DB column is named ``class``; the attribute avoids the keyword."""
    table = Build.__table__
    assert "class" in table.c
    assert Build.character_class.property.columns[0].name == "class"


def test_vote_constraints():
    table = BuildVote.__table__
    unique = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
    assert [{col.name for col in c.columns} for c in unique] == [{"user_id", "build_id"}]
    checks = {c.name for c in table.constraints if isinstance(c, CheckConstraint)}
    assert "ck_build_vote_value" in checks


def test_build_defaults(db_session, test_user):
    build = Build(title="Defaults", character_class="NINJA", user_id=test_user.id)
    db_session.add(build)
    db_session.flush()

    assert build.level == 1
    assert build.tags == []
    assert build.stats_allocation == {"vig": 0, "int": 0, "str": 0, "dex": 0}
    assert (build.upvotes, build.downvotes) == (0, 0)
    assert build.is_published is True
    assert build.created_at is not None


def test_relationships_are_instrumented_attributes():
    assert isinstance(Build.user, attributes.InstrumentedAttribute)


def test_wiki_slugs_are_unique():
    for model in (Guide, Item, Mob):
        assert model.__table__.c.slug.unique is True


def test_admin_role(db_session, test_user, admin_user):
    assert admin_user.is_admin is True
    assert test_user.is_admin is False
