"""
Resource API - Comment Route Handlers
=======================================

What:  GET /resources/{resourceID}/comments and POST /comments/{resourceID}.
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.comment import CommentCreate, CommentRow
from resource_api.schemas.common import ErrorResponse
from resource_api.services.comment_service import comment_service

router = APIRouter(tags=["Comments"])


@router.get(
    "/resources/{resource_id}/comments",
    response_model=List[CommentRow],
    summary="List comments on a resource",
)
async def list_comments(
    resource_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentRow]:
    return await comment_service.list_comments(db, resource_id)


@router.post(
    "/comments/{resource_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Comment stored", "content": {"text/plain": {}}},
        400: {"description": "Unknown resource/user or empty comment", "model": ErrorResponse},
    },
    summary="Comment on a resource",
)
async def create_comment(
    resource_id: int,
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Store one comment.

    Which resource:
        The body's resource_id wins when present; the path id is the fallback.
        Older clients send both, newer ones only the path.

    Why plain text:
        The frontend checks the confirmation string, not a JSON body.
    """
    target = payload.resource_id if payload.resource_id is not None else resource_id
    await comment_service.create_comment(
        db,
        resource_id=target,
        user_id=payload.user_id,
        comment=payload.comment,
    )
    return PlainTextResponse("Comment post request successful")
