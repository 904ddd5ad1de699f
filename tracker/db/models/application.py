"""
Application model for tracking job applications.
"""
import enum
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship
from tracker.db.base import Base, new_id, utcnow, enum_values


class ApplicationStatus(str, enum.Enum):
    """
    Application status label.

    Listed in typical lifecycle order; any status may follow any other.
    """
    APPLIED = "applied"
    PHONE_SCREEN = "phone_screen"
    TECHNICAL = "technical"
    ONSITE = "onsite"
    FINAL = "final"
    OFFER = "offer"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Posting details
    company_name = Column(Text, nullable=False)
    position_title = Column(Text, nullable=False)
    job_url = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    status = Column(
        Enum(ApplicationStatus, name="application_status", values_callable=enum_values),
        nullable=False,
        default=ApplicationStatus.APPLIED,
    )
    salary_min = Column(Integer, nullable=True)  # No ordering enforced against salary_max
    salary_max = Column(Integer, nullable=True)
    location = Column(Text, nullable=True)
    is_remote = Column(Boolean, nullable=False, default=False)
    application_date = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="applications")
    interviews = relationship("Interview", back_populates="application", passive_deletes=True)
    linked_resources = relationship("Resource", back_populates="linked_application", passive_deletes=True)

    __table_args__ = (
        Index("idx_applications_user_date", "user_id", "application_date"),
        Index("idx_applications_user_status", "user_id", "status"),
    )

    def __repr__(self):
        return f"<Application(id={self.id}, company='{self.company_name}', status='{self.status}')>"
