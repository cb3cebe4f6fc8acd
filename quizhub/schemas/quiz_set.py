from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SetCreate(BaseModel):
    name: Optional[str] = Field(None, description="Unique set name")


class SetUpdate(BaseModel):
    name: Optional[str] = Field(None, description="New set name")


class SetSummary(BaseModel):
    """Compact set representation attached to questions"""

    id: str
    name: str
    is_active: bool = Field(..., alias="isActive")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SetResponse(SetSummary):
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class SetMessageResponse(BaseModel):
    message: str
    set: SetResponse


class SetDeleteResponse(SetMessageResponse):
    was_active: bool = Field(..., alias="wasActive")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
