"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from tracker.db.models.user import User
from tracker.db.models.application import Application, ApplicationStatus
from tracker.db.models.interview import Interview, InterviewType, InterviewStatus
from tracker.db.models.resource import Resource, ResourceCategory
from tracker.db.models.question import Question, QuestionType

__all__ = [
    "User",
    "Application",
    "ApplicationStatus",
    "Interview",
    "InterviewType",
    "InterviewStatus",
    "Resource",
    "ResourceCategory",
    "Question",
    "QuestionType",
]
