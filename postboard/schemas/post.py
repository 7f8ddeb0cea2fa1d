"""Post Schemas: request bodies and JSON shapes for /post and /feed.

Invariants:
    - PostCreate takes the author by email (authorEmail), not by id
    - PostUpdate is partial: only fields present in the body are applied
    - PostResponse never embeds the author; PostWithAuthor always does
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from postboard.schemas.user import UserResponse


class PostCreate(BaseModel):
    """POST /post body."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str
    author_email: str


class PostUpdate(BaseModel):
    """PUT /post/{id} body: merged into the stored post."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    content: str | None = None
    author_id: int | None = None

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by ORM attribute name."""
        return self.model_dump(exclude_unset=True)


class PostResponse(BaseModel):
    """Post as stored: {id, content, authorId}."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    content: str
    author_id: int


class PostWithAuthor(PostResponse):
    """Feed entry: post with its author embedded."""
    author: UserResponse
