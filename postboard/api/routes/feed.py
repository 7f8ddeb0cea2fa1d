"""Feed: every post with its author embedded.

Invariants:
    - No pagination, filtering, or ordering guarantee
"""

from fastapi import APIRouter, Depends

from postboard.core.repository_protocols import Store
from postboard.infrastructure.repositories import get_store
from postboard.schemas.post import PostWithAuthor

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=list[PostWithAuthor])
async def list_feed(store: Store = Depends(get_store)):
    """List all posts with their authors."""
    posts = await store.posts.list_with_authors()
    return [PostWithAuthor.model_validate(p) for p in posts]
