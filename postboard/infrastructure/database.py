"""Database Session Manager: async engine, per-request sessions, error mapping.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - One manager per process, created in the app lifespan and closed on shutdown

Design Decisions:
    - expire_on_commit=False: returned ORM objects stay readable after commit,
      including the prior state of a deleted row
    - Pool sizing only applies to server databases; SQLite keeps SQLAlchemy's default pool
    - SQLite connections run PRAGMA foreign_keys=ON so posts.author_id is enforced
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from postboard.core.errors import DatabaseError
from postboard.db.base import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise SQLAlchemy failures as DatabaseError."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.error(f"DB integrity error: {e}")
        raise DatabaseError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error: {e}")
        raise DatabaseError("Connection or operational error", operation) from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error: {e}")
        raise DatabaseError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error: {e}")
        raise DatabaseError("Database operation failed", operation) from e


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless each connection turns them on."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Owns the engine and hands out sessions with rollback on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 5,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if database_url.startswith("sqlite"):
            enable_sqlite_foreign_keys(self.engine.sync_engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with translate_errors(session, "transaction"):
                yield session
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create any missing tables (no migrations)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.close()
    db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
