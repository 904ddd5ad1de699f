"""
Pydantic schemas for preparation resource endpoints.
"""
from typing import ClassVar, Optional, Tuple
from pydantic import Field

from tracker.db.models.resource import ResourceCategory
from tracker.schemas.common import TrackerModel, PartialUpdate, OutputDatetime


class ResourceCreate(TrackerModel):
    title: str = Field(..., min_length=1, description="Resource title")
    url: Optional[str] = Field(None, description="Where to find it")
    category: ResourceCategory = Field(..., description="Resource category")
    notes: Optional[str] = None
    is_reviewed: bool = False
    linked_application_id: Optional[str] = Field(None, description="Application this resource prepares for")


class ResourceUpdate(PartialUpdate):
    non_nullable_fields: ClassVar[Tuple[str, ...]] = ("title", "category", "is_reviewed")

    title: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = None
    category: Optional[ResourceCategory] = None
    notes: Optional[str] = None
    is_reviewed: Optional[bool] = None
    linked_application_id: Optional[str] = None


class ResourceResponse(TrackerModel):
    id: str
    user_id: str
    title: str
    url: Optional[str] = None
    category: ResourceCategory
    notes: Optional[str] = None
    is_reviewed: bool
    linked_application_id: Optional[str] = None
    created_at: OutputDatetime
