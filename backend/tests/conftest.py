"""
Feedback Tracker Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points the application at a throwaway SQLite file (aiosqlite driver)
       BEFORE any `feedback` import, then builds the schema fresh for every
       test that asks for the database.

Fixture Hierarchy:
    Function-scoped:
    ├── database:      empty schema (drop_all + create_all)
    ├── db_session:    AsyncSession on that schema
    ├── users:         admin / user / other accounts, keyed by login
    ├── test_client:   HTTPX AsyncClient wired to the ASGI app
    ├── *_headers:     Authorization headers for each account
    └── count_rows:    helper returning the row count of a model
"""

import os
import tempfile

# Must run before the first `feedback` import: settings and the engine are
# created at import time
_TEST_DIR = tempfile.mkdtemp(prefix="feedback_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from feedback.database import Base, async_session_factory, engine
from feedback.models import User
from feedback.security import ROLE_ADMIN, ROLE_USER, create_access_token


@pytest_asyncio.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session(database):
    """A session the test drives itself (commit explicitly to persist)."""
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def users(database) -> Dict[str, User]:
    """
    Three accounts:
        admin  holds ROLE_ADMIN
        user   plain ROLE_USER, the usual caller
        other  plain ROLE_USER, owns rows `user` must never see
    """
    accounts = {
        login: User(login=login, email=f"{login}@localhost", activated=True)
        for login in ("admin", "user", "other")
    }
    async with async_session_factory() as session:
        session.add_all(accounts.values())
        await session.commit()
    return accounts


@pytest_asyncio.fixture
async def test_client(database):
    """HTTPX AsyncClient talking to the app in-process through ASGITransport."""
    from feedback.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def bearer(login: str, *authorities: str) -> Dict[str, str]:
    token = create_access_token(login, authorities or (ROLE_USER,))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(users):
    return bearer("admin", ROLE_ADMIN, ROLE_USER)


@pytest.fixture
def user_headers(users):
    return bearer("user", ROLE_USER)


@pytest.fixture
def other_headers(users):
    return bearer("other", ROLE_USER)


@pytest.fixture
def count_rows(database):
    """`await count_rows(Model)` → number of rows currently in Model's table."""
    async def _count(model) -> int:
        async with async_session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()
    return _count
