"""
Resource API - To-Do List Schemas
===================================

What:  Body of POST /to-do-list and the joined rows of GET /to-do-list/{userID}.
"""

from typing import Optional

from pydantic import BaseModel

from resource_api.schemas.resource import ResourceRow


class ToDoCreate(BaseModel):
    user_id: Optional[int] = None
    resource_id: Optional[int] = None


class ToDoListRow(ResourceRow):
    """
    A resource joined with the to-do entry that bookmarks it.

    user_id is the resource owner's id (a resources column); the to-do
    owner is the userID the list was requested for. to_do_item_id is what
    DELETE /to-do-list/{listID} expects.
    """
    to_do_item_id: int
