"""Pytest fixtures for persistence integration tests.

Each test gets a fresh in-memory SQLite database through aiosqlite.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from piiguard.infrastructure.persistence.sqlalchemy import Base


@pytest.fixture
async def async_engine():
    """Async engine bound to a private in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    """Session for a single test; uncommitted work is rolled back."""
    async with session_maker() as session:
        yield session
