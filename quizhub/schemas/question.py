from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from quizhub.schemas.quiz_set import SetResponse, SetSummary


class QuestionCreate(BaseModel):
    """Incoming question; every field is checked by the service so that
    missing values produce the API's own error messages"""

    question: Optional[str] = None
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = Field(
        None, validation_alias=AliasChoices("correctAnswer", "correct_answer")
    )
    set_ref: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("set", "setId"),
        description="Set name, or a 24-character set id",
    )

    model_config = ConfigDict(populate_by_name=True)


class QuestionResponse(BaseModel):
    id: str
    question: str
    options: List[str]
    correct_answer: str = Field(..., alias="correctAnswer")
    set: Optional[SetSummary] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class QuestionMessageResponse(BaseModel):
    message: str
    question: QuestionResponse


class QuestionBatchResponse(BaseModel):
    message: str
    questions: List[QuestionResponse]


class ToggleSetStatusResponse(BaseModel):
    message: str
    question: QuestionResponse
    set: SetResponse


class DeleteBySetResponse(BaseModel):
    message: str
    deleted_count: int = Field(..., alias="deletedCount")

    model_config = ConfigDict(populate_by_name=True)
