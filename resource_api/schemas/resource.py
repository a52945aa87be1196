"""
Resource API - Resource Schemas
=================================

What:  Request body for POST /resources and the row shape returned by the
       resource listings.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class ResourceCreate(BaseModel):
    """
    Body of POST /resources.

    Every field is optional at this layer; resource_url and resource_name are
    NOT NULL in the database, so leaving them out produces a 400.

    tags may be sent as a list or as a single string (stored as a one-element
    list).
    """
    resource_url: Optional[str] = None
    author_name: Optional[str] = None
    resource_name: Optional[str] = None
    resource_description: Optional[str] = None
    tags: Optional[Union[List[str], str]] = None
    content_type: Optional[str] = None
    selene_week: Optional[str] = None
    usage_status: Optional[str] = None
    recommendation_reason: Optional[str] = None
    user_id: Optional[int] = None

    @field_validator("selene_week", mode="before")
    @classmethod
    def coerce_week(cls, v):
        # Clients send the week as either 1 or "1"
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("tags")
    @classmethod
    def wrap_single_tag(cls, v):
        if isinstance(v, str):
            return [v]
        return v


class ResourceRow(BaseModel):
    """One row of the resources table."""
    resource_id: int
    resource_url: str
    author_name: Optional[str] = None
    resource_name: str
    resource_description: Optional[str] = None
    tags: Optional[List[str]] = Field(default=None)
    content_type: Optional[str] = None
    selene_week: Optional[str] = None
    usage_status: Optional[str] = None
    recommendation_reason: Optional[str] = None
    user_id: Optional[int] = None

    model_config = {"from_attributes": True}
