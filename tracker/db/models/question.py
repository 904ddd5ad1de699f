"""
Question model for the personal interview question bank.
"""
import enum
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index, Enum, JSON
from sqlalchemy.orm import relationship
from tracker.db.base import Base, new_id, utcnow, enum_values


class QuestionType(str, enum.Enum):
    BEHAVIORAL = "behavioral"
    TECHNICAL = "technical"
    SYSTEM_DESIGN = "system_design"
    COMPANY_CULTURE = "company_culture"
    EXPERIENCE = "experience"


class Question(Base):
    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    answer_text = Column(Text, nullable=True)
    question_type = Column(
        Enum(QuestionType, name="question_type", values_callable=enum_values), nullable=False
    )
    is_favorite = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=True)  # Ordered list of strings
    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="questions")

    __table_args__ = (
        Index("idx_questions_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<Question(id={self.id}, type='{self.question_type}')>"
