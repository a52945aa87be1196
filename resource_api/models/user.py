"""
Resource API - User SQLAlchemy Model
======================================

What:  ORM model for the `users` table.
Who:   Listed by GET /users; referenced by every other table's user_id.

The users table is populated outside this service (sign-up lives in the
frontend's auth provider); this service only reads it. Only user_id,
name and is_faculty are declared. Other profile columns may exist and are
not mapped, and name may be null.
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.database import Base


class User(Base):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_faculty: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, name='{self.name}')>"
