"""
Resource API - Like Service
=============================

What:  Like/dislike counts, one user's like state, and the like upsert.

Upsert:
    INSERT INTO likes (is_liked, resource_id, user_id) VALUES (...)
    ON CONFLICT (user_id, resource_id) DO UPDATE SET is_liked = excluded.is_liked

    Built with the PostgreSQL or SQLite `insert()` construct depending on the
    session's dialect; both support ON CONFLICT with the same arguments.
    Concurrent upserts for the same pair resolve last-writer-wins in the
    database.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.models.like import Like
from resource_api.schemas.like import LikeCount, LikeState
from resource_api.services.base import translate_db_errors

logger = logging.getLogger(__name__)


def _insert_for(db: AsyncSession):
    if db.bind is not None and db.bind.dialect.name == "sqlite":
        return sqlite.insert
    return postgresql.insert


class LikeService:

    async def count_likes(self, db: AsyncSession, resource_id: int) -> List[LikeCount]:
        """
        One row per distinct non-null is_liked value.

        A resource nobody has rated returns an empty list.
        """
        query = (
            select(func.count().label("count"), Like.is_liked)
            .where(Like.resource_id == resource_id, Like.is_liked.is_not(None))
            .group_by(Like.is_liked)
        )
        with translate_db_errors("count_likes", resource_id=resource_id):
            result = await db.execute(query)
            rows = result.mappings().all()

        return [LikeCount(count=row["count"], is_liked=row["is_liked"]) for row in rows]

    async def get_like_state(
        self, db: AsyncSession, resource_id: int, user_id: int
    ) -> List[LikeState]:
        """Zero or one row: the user's is_liked value for the resource."""
        query = select(Like.is_liked).where(
            Like.resource_id == resource_id,
            Like.user_id == user_id,
        )
        with translate_db_errors("get_like_state", resource_id=resource_id, user_id=user_id):
            result = await db.execute(query)
            rows = result.mappings().all()

        return [LikeState(is_liked=row["is_liked"]) for row in rows]

    async def set_like(
        self,
        db: AsyncSession,
        resource_id: int,
        user_id: int,
        is_liked: Optional[bool],
    ) -> None:
        insert = _insert_for(db)
        stmt = insert(Like).values(
            is_liked=is_liked,
            resource_id=resource_id,
            user_id=user_id,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Like.user_id, Like.resource_id],
            set_={"is_liked": stmt.excluded.is_liked},
        )

        with translate_db_errors("set_like", resource_id=resource_id, user_id=user_id):
            await db.execute(stmt)
            await db.commit()

        logger.info(
            "User %s set like=%s on resource %s", user_id, is_liked, resource_id
        )


like_service = LikeService()
