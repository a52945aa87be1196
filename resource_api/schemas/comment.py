"""
Resource API - Comment Schemas
================================

What:  Body of POST /comments/{resourceID} and the comment row shape.
"""

from typing import Optional

from pydantic import BaseModel


class CommentCreate(BaseModel):
    """
    Body of POST /comments/{resourceID}.

    resource_id in the body wins; when it is omitted the path parameter is
    used instead.
    """
    user_id: Optional[int] = None
    resource_id: Optional[int] = None
    comment: Optional[str] = None


class CommentRow(BaseModel):
    comment_id: int
    resource_id: int
    user_id: int
    comment: str

    model_config = {"from_attributes": True}
