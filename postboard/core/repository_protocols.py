"""Boundary Protocols: the persistence capability route handlers depend on.

Invariants:
    - Handlers only see these Protocols (via DataStore), never raw sessions
    - Every method is async: implementations do IO
    - Missing rows on reads return None; missing rows on writes raise RecordNotFoundError

Design Decisions:
    - Protocol over ABC: fakes in tests need no inheritance
"""

from typing import Any, Protocol

from postboard.models.post import Post
from postboard.models.user import User


class PostRepository(Protocol):
    """Contract for post persistence."""
    async def list_with_authors(self) -> list[Post]: ...
    async def create(self, content: str, author_email: str) -> Post: ...
    async def get(self, post_id: int) -> Post | None: ...
    async def update(self, post_id: int, fields: dict[str, Any]) -> Post: ...
    async def delete(self, post_id: int) -> Post: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(
        self, username: str, email: str, profile: dict[str, Any],
    ) -> User: ...
    async def get_by_username(self, username: str) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...


class Store(Protocol):
    """Both repositories, as handed to route handlers."""
    posts: PostRepository
    users: UserRepository
