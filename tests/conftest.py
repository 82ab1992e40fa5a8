# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from epitome_codex.core.security import create_access_token
from epitome_codex.db.session import Base
from epitome_codex.db.session import get_db as app_get_session
from epitome_codex.main import app as fastapi_app
from epitome_codex.models import Build, User
from epitome_codex.models.user import ROLE_ADMIN, ROLE_USER

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Services commit, so every test wipes the tables on the way out.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _make_user(db_session: Session, name: str, username: str, role: str = ROLE_USER) -> User:
    user = User(name=name, username=username, role=role)
    db_session.add(user)
    db_session.flush()
    db_session.refresh(user)
    return user


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted test user."""
    return _make_user(db_session, "Test User", "test-user")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted user."""
    return _make_user(db_session, "Other User", "other-user")


@pytest.fixture()
def admin_user(db_session: Session) -> User:
    """Create and return a user holding the ADMIN role."""
    return _make_user(db_session, "Admin User", "admin-user", role=ROLE_ADMIN)


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    token = create_access_token(other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    """Return authorization headers for the admin user."""
    token = create_access_token(admin_user.id)
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture()
def make_build(db_session: Session) -> Any:
    """Return a factory persisting builds with sensible defaults."""

    def _make(**overrides: Any) -> Build:
        data: dict[str, Any] = {
            "title": "Test Build",
            "character_class": "WARRIOR",
            "level": 10,
            "tags": ["PvP"],
            "stats_allocation": {"vig": 10, "int": 0, "str": 20, "dex": 5},
            "skill_points": {},
            "is_published": True,
        }
        data.update(overrides)
        build = Build(**data)
        db_session.add(build)
        db_session.flush()
        db_session.refresh(build)
        return build

    return _make


@pytest.fixture()
def test_build(make_build: Any, test_user: User) -> Build:
    """Create a baseline build owned by the test user."""
    return make_build(user_id=test_user.id)
