"""
Resource API - To-Do List Route Handlers
==========================================

What:  GET /to-do-list/{userID}, POST /to-do-list, DELETE /to-do-list/{listID}.

DELETE does not check that the item exists or belongs to anyone in
particular; it confirms either way.
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.common import ErrorResponse
from resource_api.schemas.todo import ToDoCreate, ToDoListRow
from resource_api.services.todo_service import todo_service

router = APIRouter(prefix="/to-do-list", tags=["To-Do List"])


@router.get(
    "/{user_id}",
    response_model=List[ToDoListRow],
    summary="A user's to-do list, joined with resource data",
)
async def list_to_do_items(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ToDoListRow]:
    return await todo_service.list_for_user(db, user_id)


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Item stored", "content": {"text/plain": {}}},
        400: {"description": "Unknown resource or user", "model": ErrorResponse},
    },
    summary="Add a resource to a user's to-do list",
)
async def add_to_do_item(
    payload: ToDoCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    await todo_service.add_item(db, resource_id=payload.resource_id, user_id=payload.user_id)
    return PlainTextResponse("Todo list post request successful")


@router.delete(
    "/{list_id}",
    response_class=PlainTextResponse,
    summary="Delete a to-do item by its id",
)
async def delete_to_do_item(
    list_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Delete by to_do_item_id.

    The confirmation is sent whether zero or one row went away, and the
    owner is not checked: the id alone identifies the item.
    """
    await todo_service.delete_item(db, list_id)
    return PlainTextResponse("Deleted todo item")
