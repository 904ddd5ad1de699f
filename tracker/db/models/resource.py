"""
Resource model for interview preparation material.
"""
import enum
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship
from tracker.db.base import Base, new_id, utcnow, enum_values


class ResourceCategory(str, enum.Enum):
    ALGORITHMS = "algorithms"
    SYSTEM_DESIGN = "system_design"
    BEHAVIORAL = "behavioral"
    COMPANY_SPECIFIC = "company_specific"
    RESUME = "resume"
    OTHER = "other"


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    url = Column(Text, nullable=True)
    category = Column(
        Enum(ResourceCategory, name="resource_category", values_callable=enum_values), nullable=False
    )
    notes = Column(Text, nullable=True)
    is_reviewed = Column(Boolean, nullable=False, default=False)
    # Cleared, not cascaded, when the linked application goes away
    linked_application_id = Column(
        String(36), ForeignKey("applications.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="resources")
    linked_application = relationship("Application", back_populates="linked_resources")

    __table_args__ = (
        Index("idx_resources_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<Resource(id={self.id}, title='{self.title}', category='{self.category}')>"
