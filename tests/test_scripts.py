# tests/test_scripts.py
"""Tests for the seed and token helper scripts."""

import pytest
from sqlalchemy import func, select

from epitome_codex.core.security import decode_access_token
from epitome_codex.models import Build, Guide, Item
from epitome_codex.scripts import seed, tokens


def test_seed_is_idempotent(db_session) -> None:
    owner = seed.seed_demo_user(db_session)
    assert seed.seed_builds(db_session, owner) == len(seed.SAMPLE_BUILDS)
    db_session.flush()

    assert seed.seed_demo_user(db_session).id == owner.id
    assert seed.seed_builds(db_session, owner) == 0
    assert db_session.scalar(select(func.count()).select_from(Build)) == len(seed.SAMPLE_BUILDS)


def test_token_for_existing_user(db_session, test_user, monkeypatch, capsys) -> None:
    monkeypatch.setattr(tokens, "SessionLocal", lambda: db_session)
    monkeypatch.setattr("sys.argv", ["tokens", "--user-id", test_user.id])

    tokens.main()

    assert decode_access_token(capsys.readouterr().out.strip()) == test_user.id


def test_token_for_unknown_user(db_session, monkeypatch) -> None:
    monkeypatch.setattr(tokens, "SessionLocal", lambda: db_session)
    monkeypatch.setattr("sys.argv", ["tokens", "--user-id", "nobody"])

    with pytest.raises(SystemExit) as exc_info:
        tokens.main()
    assert exc_info.value.code == 1


def test_seed_wiki_content_is_idempotent(db_session) -> None:
    owner = seed.seed_demo_user(db_session)
    assert seed.seed_items(db_session) == len(seed.SAMPLE_ITEMS)
    assert seed.seed_mobs(db_session) == len(seed.SAMPLE_MOBS)
    assert seed.seed_guide(db_session, owner) is True
    db_session.flush()

    assert seed.seed_items(db_session) == 0
    assert seed.seed_mobs(db_session) == 0
    assert seed.seed_guide(db_session, owner) is False
    assert db_session.scalar(select(Item.slug).where(Item.name == "Abyssal Edge")) == "abyssal-edge"
    guide = db_session.scalar(select(Guide))
    assert guide.slug == "getting-started-in-epitome"
    assert guide.is_published is True
