"""User Schemas: verbatim pass-through of profile fields.

Invariants:
    - username and email are required on create; every other field is kept as-is
    - UserResponse flattens the stored profile into the top level
    - id, username, email always win over a profile key of the same name
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from postboard.models.user import User


class UserCreate(BaseModel):
    """POST /user body."""
    model_config = ConfigDict(extra="allow")

    username: str
    email: str

    def profile(self) -> dict[str, Any]:
        """Extra fields, stored verbatim in the profile column."""
        return dict(self.model_extra or {})


class UserResponse(BaseModel):
    """User as returned to clients."""
    model_config = ConfigDict(extra="allow", from_attributes=True)

    id: int
    username: str
    email: str

    @model_validator(mode="before")
    @classmethod
    def flatten_profile(cls, data: Any) -> Any:
        if isinstance(data, User):
            return {
                **(data.profile or {}),
                "id": data.id,
                "username": data.username,
                "email": data.email,
            }
        return data
