"""
Resource API - Comment SQLAlchemy Model
=========================================

What:  ORM model for the `comments` table.
Who:   Inserted by POST /comments/{resourceID}; listed per resource.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.database import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resources.resource_id"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id"),
        nullable=False,
    )

    comment: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Comment(comment_id={self.comment_id}, resource_id={self.resource_id})>"
