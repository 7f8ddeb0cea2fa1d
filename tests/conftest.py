"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never reach a real PostgreSQL server
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from postboard.db.base import Base  # noqa: E402
from postboard.infrastructure.database import enable_sqlite_foreign_keys  # noqa: E402
import postboard.models  # noqa: E402,F401
from postboard.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_user(test_db):
    """Insert alice (a@x.com) directly into the test DB."""
    user = User(username="alice", email="a@x.com", profile={"name": "Alice"})
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
