"""Post CRUD: create, read, partial update, delete.

Invariants:
    - Path id is coerced to int before any storage call
    - Only GET answers 404 for a missing id; update/delete surface the storage error (500)
    - DELETE returns the post as it was before deletion
"""

from fastapi import APIRouter, Depends

from postboard.core.errors import ResourceNotFoundError
from postboard.core.repository_protocols import Store
from postboard.infrastructure.repositories import get_store
from postboard.schemas.post import PostCreate, PostUpdate, PostResponse

router = APIRouter(prefix="/post", tags=["posts"])


@router.post("", response_model=PostResponse)
async def create_post(body: PostCreate, store: Store = Depends(get_store)):
    """Create a post authored by the user with body.authorEmail."""
    post = await store.posts.create(body.content, body.author_email)
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, store: Store = Depends(get_store)):
    post = await store.posts.get(post_id)
    if not post:
        raise ResourceNotFoundError("Post")
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    body: PostUpdate | None = None,
    store: Store = Depends(get_store),
):
    """Merge the supplied fields into the stored post; no body means no changes."""
    changes = body.changes() if body is not None else {}
    post = await store.posts.update(post_id, changes)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=PostResponse)
async def delete_post(post_id: int, store: Store = Depends(get_store)):
    post = await store.posts.delete(post_id)
    return PostResponse.model_validate(post)
