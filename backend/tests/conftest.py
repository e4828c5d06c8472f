"""Shared fixtures for holiday tracker backend tests.

Uses SQLite (aiosqlite) by default, so no PostgreSQL is required.
Set TEST_DATABASE_URL to override (e.g. for CI with real PostgreSQL).
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

from app.database import Base, enforce_foreign_keys  # noqa: E402


# ---------------------------------------------------------------------------
# Engine: one fresh in-memory database per test
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def engine():
    from app import models  # noqa: F401 — populate Base.metadata

    engine_kwargs = {}
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine_kwargs = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, **engine_kwargs)
    enforce_foreign_keys(test_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


# ---------------------------------------------------------------------------
# Reset rate-limiter counters before every test
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Clear in-memory rate-limit counters so tests never block each other."""
    from app.core.rate_limit import limiter

    limiter.reset()


# ---------------------------------------------------------------------------
# Per-test session with rollback
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def db_session(engine):
    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture()
async def repo(db_session: AsyncSession):
    from app.repositories.holiday_repository import HolidayRepository

    return HolidayRepository(db_session)


# ---------------------------------------------------------------------------
# HTTP test client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def client(db_session: AsyncSession):
    from app.database import get_db
    from app.main import app

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience: the Alice/Bob team used across API tests
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def team(client: AsyncClient):
    """Create Alice and Bob through the API and return their response bodies."""
    members = {}
    for name in ("Alice", "Bob"):
        resp = await client.post("/api/v1/team-members/", json={"name": name})
        assert resp.status_code == 201, resp.text
        members[name] = resp.json()
    return members
