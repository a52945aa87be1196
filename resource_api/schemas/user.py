"""
Resource API - User Row Schema
================================

The `users` table belongs to the frontend's sign-up flow, not to this service.
Only the columns listed here are returned; any other profile columns are
left out of GET /users. `name` and `is_faculty` are optional so a sparse
profile row still serialises.
"""

from typing import Optional

from pydantic import BaseModel


class UserRow(BaseModel):
    user_id: int
    name: Optional[str] = None
    is_faculty: Optional[bool] = False

    model_config = {"from_attributes": True}
