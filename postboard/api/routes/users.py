"""User endpoints: create and exact-match lookup by username."""

from fastapi import APIRouter, Depends

from postboard.core.errors import ResourceNotFoundError
from postboard.core.repository_protocols import Store
from postboard.infrastructure.repositories import get_store
from postboard.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/user", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(body: UserCreate, store: Store = Depends(get_store)):
    """Create a user; fields other than username/email are kept verbatim."""
    user = await store.users.create(body.username, body.email, body.profile())
    return UserResponse.model_validate(user)


@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, store: Store = Depends(get_store)):
    user = await store.users.get_by_username(username)
    if not user:
        raise ResourceNotFoundError("User")
    return UserResponse.model_validate(user)
