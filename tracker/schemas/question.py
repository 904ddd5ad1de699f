"""
Pydantic schemas for question bank endpoints.
"""
from typing import ClassVar, List, Optional, Tuple
from pydantic import Field

from tracker.db.models.question import QuestionType
from tracker.schemas.common import TrackerModel, PartialUpdate, OutputDatetime


class QuestionCreate(TrackerModel):
    question_text: str = Field(..., min_length=1, description="The question")
    answer_text: Optional[str] = Field(None, description="Prepared answer")
    question_type: QuestionType = Field(..., description="Question type")
    is_favorite: bool = False
    tags: Optional[List[str]] = Field(None, description="Ordered tags")


class QuestionUpdate(PartialUpdate):
    non_nullable_fields: ClassVar[Tuple[str, ...]] = ("question_text", "question_type", "is_favorite")

    question_text: Optional[str] = Field(None, min_length=1)
    answer_text: Optional[str] = None
    question_type: Optional[QuestionType] = None
    is_favorite: Optional[bool] = None
    tags: Optional[List[str]] = None


class QuestionResponse(TrackerModel):
    id: str
    user_id: str
    question_text: str
    answer_text: Optional[str] = None
    question_type: QuestionType
    is_favorite: bool
    tags: Optional[List[str]] = None
    created_at: OutputDatetime
