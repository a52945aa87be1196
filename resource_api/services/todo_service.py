"""
Resource API - To-Do List Service
===================================

What:  A user's bookmarked resources.

Query plans:
    list_for_user:  SELECT resources.*, to_do_list.to_do_item_id
                    FROM to_do_list JOIN resources
                      ON to_do_list.resource_id = resources.resource_id
                     AND to_do_list.user_id = :user_id
    add_item:       INSERT INTO to_do_list (resource_id, user_id) VALUES (...)
    delete_item:    DELETE FROM to_do_list WHERE to_do_item_id = :id

delete_item performs no existence or ownership check: any caller that knows
an item id can delete it, and deleting an unknown id is not an error.
"""

import logging
from typing import List, Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.models.resource import Resource
from resource_api.models.todo import ToDoItem
from resource_api.schemas.resource import ResourceRow
from resource_api.schemas.todo import ToDoListRow
from resource_api.services.base import translate_db_errors

logger = logging.getLogger(__name__)


class ToDoService:

    async def list_for_user(self, db: AsyncSession, user_id: int) -> List[ToDoListRow]:
        query = (
            select(Resource, ToDoItem.to_do_item_id)
            .join(
                ToDoItem,
                and_(
                    ToDoItem.resource_id == Resource.resource_id,
                    ToDoItem.user_id == user_id,
                ),
            )
            .order_by(ToDoItem.to_do_item_id)
        )
        with translate_db_errors("list_to_do_items", user_id=user_id):
            result = await db.execute(query)
            rows = result.all()

        return [
            ToDoListRow(
                **ResourceRow.model_validate(resource).model_dump(),
                to_do_item_id=item_id,
            )
            for resource, item_id in rows
        ]

    async def add_item(
        self, db: AsyncSession, resource_id: Optional[int], user_id: Optional[int]
    ) -> None:
        item = ToDoItem(resource_id=resource_id, user_id=user_id)
        with translate_db_errors("add_to_do_item", resource_id=resource_id, user_id=user_id):
            db.add(item)
            await db.flush()
            await db.commit()
        logger.info("To-do item %s added for user %s", item.to_do_item_id, user_id)

    async def delete_item(self, db: AsyncSession, item_id: int) -> int:
        """Returns the number of rows deleted (0 or 1)."""
        with translate_db_errors("delete_to_do_item", to_do_item_id=item_id):
            result = await db.execute(
                delete(ToDoItem).where(ToDoItem.to_do_item_id == item_id)
            )
            deleted = result.rowcount or 0
            await db.commit()
        logger.info("Deleted to-do item %s (%d row(s))", item_id, deleted)
        return deleted


todo_service = ToDoService()
