"""
Resource API - Resource SQLAlchemy Model
==========================================

What:  ORM model representing the `resources` table.
How:   Inherits from the shared DeclarativeBase.
Who:   Used by ResourceService for inserts and listings, and joined by
       ToDoService when building a user's to-do list.

Lifecycle:
    1. Created by POST /resources
    2. Never updated or deleted by this service
    3. Listed newest first (resource_id DESC)

Tags:
    PostgreSQL stores tags as TEXT[]. The SQLite variant (tests, local
    development) stores the same list as JSON, so Python code always sees a
    list of strings.
"""

from typing import List, Optional

from sqlalchemy import JSON, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.database import Base

TagArray = ARRAY(Text).with_variant(JSON(), "sqlite")


class Resource(Base):
    """A shared link/recommendation with metadata."""

    __tablename__ = "resources"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Serial: descending order doubles as "newest first"
    resource_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ── Link & Attribution ────────────────────────────────────────────────
    resource_url: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Display ───────────────────────────────────────────────────────────
    resource_name: Mapped[str] = mapped_column(Text, nullable=False)
    resource_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[Optional[List[str]]] = mapped_column(TagArray, nullable=True)
    content_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Course Context ────────────────────────────────────────────────────
    selene_week: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    usage_status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    recommendation_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Owner ─────────────────────────────────────────────────────────────
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.user_id"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Resource(resource_id={self.resource_id}, resource_name='{self.resource_name}')>"
