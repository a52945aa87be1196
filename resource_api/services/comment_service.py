"""
Resource API - Comment Service
================================

What:  Lists and inserts rows of the `comments` table.

Comments are returned in natural storage order; nothing guarantees
chronological order beyond that.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.models.comment import Comment
from resource_api.schemas.comment import CommentRow
from resource_api.services.base import translate_db_errors

logger = logging.getLogger(__name__)


class CommentService:

    async def list_comments(self, db: AsyncSession, resource_id: int) -> List[CommentRow]:
        with translate_db_errors("list_comments", resource_id=resource_id):
            result = await db.execute(
                select(Comment).where(Comment.resource_id == resource_id)
            )
            comments = result.scalars().all()
        return [CommentRow.model_validate(c) for c in comments]

    async def create_comment(
        self,
        db: AsyncSession,
        resource_id: Optional[int],
        user_id: Optional[int],
        comment: Optional[str],
    ) -> None:
        """
        Raises:
            ValidationError: unknown resource/user, or an empty comment (→ 400)
        """
        row = Comment(resource_id=resource_id, user_id=user_id, comment=comment)

        with translate_db_errors("create_comment", resource_id=resource_id, user_id=user_id):
            db.add(row)
            await db.flush()
            await db.commit()

        logger.info("Comment %s added to resource %s", row.comment_id, resource_id)


comment_service = CommentService()
