"""
Resource API - ORM Models
===========================

Importing this package registers every table on `Base.metadata`.

Tables (owned by the database; declared here so queries are typed):
    users        → User       (read only from this service)
    resources    → Resource
    comments     → Comment
    likes        → Like       (one row per (resource, user))
    to_do_list   → ToDoItem
"""

from resource_api.models.user import User
from resource_api.models.resource import Resource
from resource_api.models.comment import Comment
from resource_api.models.like import Like
from resource_api.models.todo import ToDoItem

__all__ = ["User", "Resource", "Comment", "Like", "ToDoItem"]
