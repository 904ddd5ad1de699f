"""
Pydantic schemas for interview endpoints.
"""
from typing import ClassVar, Optional, Tuple
from pydantic import Field

from tracker.db.models.interview import InterviewType, InterviewStatus
from tracker.schemas.common import TrackerModel, PartialUpdate, InputDatetime, OutputDatetime


class InterviewCreate(TrackerModel):
    """Interview fields; `application_id` must name one of the caller's applications."""
    application_id: str = Field(..., min_length=1, description="Parent application ID")
    interview_type: InterviewType = Field(..., description="Kind of interview")
    interview_date: InputDatetime = Field(..., description="Scheduled date and time")
    duration_minutes: Optional[int] = Field(None, ge=1, description="Expected length in minutes")
    interviewer_names: Optional[str] = Field(None, description="Who is interviewing")
    platform: Optional[str] = Field(None, description="Meeting link or platform name")
    status: InterviewStatus = Field(default=InterviewStatus.SCHEDULED)
    prep_notes: Optional[str] = None
    interview_notes: Optional[str] = None
    questions_asked: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5, description="Self-assessment, 1 to 5")
    follow_up_actions: Optional[str] = None


class InterviewUpdate(PartialUpdate):
    non_nullable_fields: ClassVar[Tuple[str, ...]] = ("application_id", "interview_type", "interview_date", "status")

    application_id: Optional[str] = Field(None, min_length=1)
    interview_type: Optional[InterviewType] = None
    interview_date: Optional[InputDatetime] = None
    duration_minutes: Optional[int] = Field(None, ge=1)
    interviewer_names: Optional[str] = None
    platform: Optional[str] = None
    status: Optional[InterviewStatus] = None
    prep_notes: Optional[str] = None
    interview_notes: Optional[str] = None
    questions_asked: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    follow_up_actions: Optional[str] = None


class InterviewResponse(TrackerModel):
    id: str
    application_id: str
    interview_type: InterviewType
    interview_date: OutputDatetime
    duration_minutes: Optional[int] = None
    interviewer_names: Optional[str] = None
    platform: Optional[str] = None
    status: InterviewStatus
    prep_notes: Optional[str] = None
    interview_notes: Optional[str] = None
    questions_asked: Optional[str] = None
    rating: Optional[int] = None
    follow_up_actions: Optional[str] = None
    created_at: OutputDatetime


class InterviewDetailResponse(InterviewResponse):
    """Interview plus display-only fields projected from its application."""
    company_name: Optional[str] = None
    position_title: Optional[str] = None
    job_url: Optional[str] = None
