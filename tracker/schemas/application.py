"""
Pydantic schemas for application endpoints.
"""
from typing import ClassVar, Dict, Optional, Tuple
from pydantic import Field

from tracker.db.models.application import ApplicationStatus
from tracker.schemas.common import TrackerModel, PartialUpdate, InputDatetime, OutputDatetime


class ApplicationCreate(TrackerModel):
    """Client-writable application fields; ownership and timestamps are server-side."""
    company_name: str = Field(..., min_length=1, description="Company name")
    position_title: str = Field(..., min_length=1, description="Position title")
    job_url: Optional[str] = Field(None, description="Job posting URL")
    logo_url: Optional[str] = Field(None, description="Company logo URL")
    status: ApplicationStatus = Field(default=ApplicationStatus.APPLIED, description="Application status")
    salary_min: Optional[int] = Field(None, ge=0, description="Lower end of the salary range")
    salary_max: Optional[int] = Field(None, ge=0, description="Upper end of the salary range")
    location: Optional[str] = Field(None, description="Job location")
    is_remote: bool = Field(default=False, description="Remote position")
    application_date: InputDatetime = Field(..., description="Date applied")
    notes: Optional[str] = Field(None, description="Free-text notes")

    class Config:
        json_schema_extra = {
            "example": {
                "companyName": "Acme",
                "positionTitle": "Backend Engineer",
                "jobUrl": "https://acme.example/jobs/42",
                "status": "applied",
                "salaryMin": 120000,
                "salaryMax": 150000,
                "location": "Remote",
                "isRemote": True,
                "applicationDate": "2024-01-01",
            }
        }


class ApplicationUpdate(PartialUpdate):
    """Partial application update; only sent fields change."""
    non_nullable_fields: ClassVar[Tuple[str, ...]] = ("company_name", "position_title", "status", "is_remote", "application_date")

    company_name: Optional[str] = Field(None, min_length=1)
    position_title: Optional[str] = Field(None, min_length=1)
    job_url: Optional[str] = None
    logo_url: Optional[str] = None
    status: Optional[ApplicationStatus] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    application_date: Optional[InputDatetime] = None
    notes: Optional[str] = None


class ApplicationResponse(TrackerModel):
    id: str
    user_id: str
    company_name: str
    position_title: str
    job_url: Optional[str] = None
    logo_url: Optional[str] = None
    status: ApplicationStatus
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    location: Optional[str] = None
    is_remote: bool
    application_date: OutputDatetime
    notes: Optional[str] = None
    created_at: OutputDatetime
    updated_at: OutputDatetime


class ApplicationStats(TrackerModel):
    """Counts derived from the caller's applications; zero-count statuses are absent."""
    total: int
    by_status: Dict[str, int]
