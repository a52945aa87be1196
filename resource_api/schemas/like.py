"""
Resource API - Like Schemas
=============================

What:  Body of POST /resources/{resourceID}/likes and the two read shapes.

The like body uses camelCase `userId` (what the frontend sends); it is
exposed to Python code as `user_id`.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LikeUpdate(BaseModel):
    """`like` is true for a like, false for a dislike, null to clear."""
    model_config = ConfigDict(populate_by_name=True)

    like: Optional[bool] = None
    user_id: int = Field(alias="userId")


class LikeCount(BaseModel):
    """One group of GET /resources/{resourceID}/likes."""
    count: int
    is_liked: bool


class LikeState(BaseModel):
    """The single row of GET /resources/{resourceID}/likes/{userID}."""
    is_liked: Optional[bool] = None
