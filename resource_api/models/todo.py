"""
Resource API - To-Do Item SQLAlchemy Model
============================================

What:  ORM model for the `to_do_list` table: a user's bookmark of a resource.
Who:   Inserted by POST /to-do-list, listed by GET /to-do-list/{userID}
       (joined with resources), deleted by DELETE /to-do-list/{listID}.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.database import Base


class ToDoItem(Base):
    __tablename__ = "to_do_list"

    to_do_item_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resources.resource_id"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<ToDoItem(to_do_item_id={self.to_do_item_id}, "
            f"resource_id={self.resource_id}, user_id={self.user_id})>"
        )
