"""
Resource API - Like SQLAlchemy Model
======================================

What:  ORM model for the `likes` table.
How:   Composite primary key (resource_id, user_id): at most one row per
       user per resource. LikeService upserts against this key.

is_liked:
    true  → liked
    false → disliked
    NULL  → no opinion (excluded from counts)
"""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.database import Base


class Like(Base):
    __tablename__ = "likes"

    resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resources.resource_id"),
        primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id"),
        primary_key=True,
    )

    is_liked: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Like(resource_id={self.resource_id}, user_id={self.user_id}, "
            f"is_liked={self.is_liked})>"
        )
