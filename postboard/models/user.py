"""User ORM: account record, unique by username and by email.

Invariants:
    - id is an integer primary key assigned by storage
    - username and email are unique and non-nullable
    - profile holds any extra fields the client sent, verbatim

Design Decisions:
    - JSON column for profile: arbitrary fields without schema changes
    - posts relationship has no cascade; deleting a referenced user is left to the FK
"""

from sqlalchemy import Integer, String, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from postboard.db.base import Base


class User(Base):
    """User entity: author of zero or more posts."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True,
    )
    profile: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="author",
    )
