"""
Interview model.

Interviews carry no user column: ownership always goes through the parent
Application.
"""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship
from tracker.db.base import Base, new_id, utcnow, enum_values


class InterviewType(str, enum.Enum):
    PHONE_SCREEN = "phone_screen"
    TECHNICAL = "technical"
    SYSTEM_DESIGN = "system_design"
    BEHAVIORAL = "behavioral"
    FINAL = "final"
    OTHER = "other"


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String(36), primary_key=True, default=new_id)
    application_id = Column(
        String(36), ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Scheduling
    interview_type = Column(
        Enum(InterviewType, name="interview_type", values_callable=enum_values), nullable=False
    )
    interview_date = Column(DateTime, nullable=False)
    duration_minutes = Column(Integer, nullable=True)
    interviewer_names = Column(Text, nullable=True)
    platform = Column(Text, nullable=True)  # URL or a plain label
    status = Column(
        Enum(InterviewStatus, name="interview_status", values_callable=enum_values),
        nullable=False,
        default=InterviewStatus.SCHEDULED,
    )

    # Notes before and after
    prep_notes = Column(Text, nullable=True)
    interview_notes = Column(Text, nullable=True)
    questions_asked = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    follow_up_actions = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    application = relationship("Application", back_populates="interviews")

    __table_args__ = (
        Index("idx_interviews_status_date", "status", "interview_date"),
    )

    # Read-only projections of the parent, populated by owner-joined queries
    @property
    def company_name(self):
        return self.application.company_name if self.application else None

    @property
    def position_title(self):
        return self.application.position_title if self.application else None

    @property
    def job_url(self):
        return self.application.job_url if self.application else None

    def __repr__(self):
        return f"<Interview(id={self.id}, application_id={self.application_id}, type='{self.interview_type}')>"
