"""Post ORM: a content record authored by exactly one User.

Invariants:
    - author_id is a non-nullable FK to users.id
"""

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from postboard.db.base import Base


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )

    author: Mapped["User"] = relationship("User", back_populates="posts")
