from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    name: str
    email: str
    joined_on: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("joinedOn", "joined_on")
    )


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    joined_on: datetime = Field(..., alias="joinedOn")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserDeleteResponse(BaseModel):
    message: str
    user: UserResponse
