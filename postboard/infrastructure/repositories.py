"""SQL Repositories: SQLAlchemy implementations of the persistence Protocols.

Invariants:
    - Every statement and commit runs under translate_errors (no raw SQLAlchemy errors escape)
    - Writes against a missing row raise RecordNotFoundError (500), never a 404
    - Post creation checks the author exists before inserting; no orphan rows
    - get_by_username / get_by_email are exact, case-sensitive matches
"""

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from postboard.core.errors import RecordNotFoundError
from postboard.infrastructure.database import get_db, translate_errors
from postboard.models.post import Post
from postboard.models.user import User

logger = logging.getLogger(__name__)


class SqlPostRepository:
    """Post persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_with_authors(self) -> list[Post]:
        async with translate_errors(self._db, "query"):
            result = await self._db.execute(
                select(Post).options(selectinload(Post.author)),
            )
            return list(result.scalars().all())

    async def create(self, content: str, author_email: str) -> Post:
        """Insert a post, connecting it to the user that owns author_email."""
        async with translate_errors(self._db, "create"):
            result = await self._db.execute(
                select(User.id).where(User.email == author_email),
            )
            author_id = result.scalar_one_or_none()
            if author_id is None:
                raise RecordNotFoundError(
                    f"No User with email '{author_email}' to connect as author",
                    "create",
                )
            post = Post(content=content, author_id=author_id)
            self._db.add(post)
            await self._db.commit()
            await self._db.refresh(post)
        logger.info(f"Created post {post.id} for user {author_id}")
        return post

    async def get(self, post_id: int) -> Post | None:
        async with translate_errors(self._db, "query"):
            return await self._db.get(Post, post_id)

    async def update(self, post_id: int, fields: dict[str, Any]) -> Post:
        """Merge fields into the stored post; absent keys keep their values."""
        async with translate_errors(self._db, "update"):
            post = await self._db.get(Post, post_id)
            if post is None:
                raise RecordNotFoundError("Record to update not found", "update")
            for key, value in fields.items():
                setattr(post, key, value)
            await self._db.commit()
            await self._db.refresh(post)
        return post

    async def delete(self, post_id: int) -> Post:
        """Delete the post and return it as it was before deletion."""
        async with translate_errors(self._db, "delete"):
            post = await self._db.get(Post, post_id)
            if post is None:
                raise RecordNotFoundError("Record to delete does not exist", "delete")
            await self._db.delete(post)
            await self._db.commit()
        logger.info(f"Deleted post {post_id}")
        return post


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self, username: str, email: str, profile: dict[str, Any],
    ) -> User:
        async with translate_errors(self._db, "create"):
            user = User(username=username, email=email, profile=profile)
            self._db.add(user)
            await self._db.commit()
            await self._db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    async def get_by_username(self, username: str) -> User | None:
        async with translate_errors(self._db, "query"):
            result = await self._db.execute(
                select(User).where(User.username == username),
            )
            return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        async with translate_errors(self._db, "query"):
            result = await self._db.execute(
                select(User).where(User.email == email),
            )
            return result.scalar_one_or_none()


class DataStore:
    """Both repositories bound to one request's session."""

    def __init__(self, db: AsyncSession):
        self.posts = SqlPostRepository(db)
        self.users = SqlUserRepository(db)


async def get_store(db: AsyncSession = Depends(get_db)) -> DataStore:
    """FastAPI dependency: overridden in tests to inject fakes."""
    return DataStore(db)
