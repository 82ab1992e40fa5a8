# tests/test_settings.py
"""Tests for configuration loading."""

from epitome_codex.core.settings import Settings


def test_sync_url_is_the_configured_url() -> None:
    url = "postgresql+asyncpg://codex:secret@db/codex"
    config = Settings(_env_file=None, DATABASE_URL=url)

    assert config.database_url_sync == url


def test_test_database_override() -> None:
    config = Settings(
        _env_file=None,
        DATABASE_URL="sqlite:///./main.db",
        TEST_DATABASE_URL="sqlite:///./test.db",
        USE_TEST_DATABASE=True,
    )

    assert config.effective_database_url == "sqlite:///./test.db"
    assert config.database_url_sync == "sqlite:///./test.db"


def test_admin_usernames_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ADMIN_USERNAMES", '["mod-one", "mod-two"]')

    config = Settings(_env_file=None)

    assert config.admin_usernames == ["mod-one", "mod-two"]
