"""
Resource API - Like Route Handlers
====================================

What:  Like/dislike counts, a user's like state, and the like upsert.
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.common import ErrorResponse
from resource_api.schemas.like import LikeCount, LikeState, LikeUpdate
from resource_api.services.like_service import like_service

router = APIRouter(prefix="/resources/{resource_id}/likes", tags=["Likes"])


@router.get(
    "",
    response_model=List[LikeCount],
    summary="Like and dislike counts for a resource",
    description="One entry per is_liked value; empty when nobody has rated the resource.",
)
async def count_likes(
    resource_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[LikeCount]:
    """
    Rows look like [{"count": 3, "is_liked": true}, {"count": 1, "is_liked": false}].
    Cleared votes (is_liked null) are not counted.
    """
    return await like_service.count_likes(db, resource_id)


@router.get(
    "/{user_id}",
    response_model=List[LikeState],
    summary="Whether a user liked a resource",
)
async def get_like_state(
    resource_id: int,
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[LikeState]:
    return await like_service.get_like_state(db, resource_id, user_id)


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Like state stored", "content": {"text/plain": {}}},
        400: {"description": "Unknown resource or user", "model": ErrorResponse},
    },
    summary="Like or dislike a resource",
    description="Insert-or-overwrite keyed on (user, resource); the latest value wins.",
)
async def set_like(
    resource_id: int,
    payload: LikeUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Upsert the caller's vote.

    Body: {"like": true | false | null, "userId": 9}

    Concurrency:
        Two requests for the same (user, resource) never create two rows;
        ON CONFLICT makes the database pick the last writer. No lock is taken
        here.
    """
    await like_service.set_like(db, resource_id, payload.user_id, payload.like)
    return PlainTextResponse("Like/Dislike sent")
