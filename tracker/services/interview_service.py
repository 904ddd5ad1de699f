"""
Interview store.

Interviews have no owner column. Every query joins through the parent
Application and filters on its user_id.
"""
import logging
from typing import List, Optional, Union
from sqlalchemy.orm import Session, Query, contains_eager

from tracker.core.errors import AccessDeniedError
from tracker.db.base import utcnow
from tracker.db.models.application import Application
from tracker.db.models.interview import Interview, InterviewStatus
from tracker.schemas.interview import InterviewCreate, InterviewUpdate
from tracker.services.application_service import get_application
from tracker.services.filters import coerce_filter

logger = logging.getLogger(__name__)

DEFAULT_UPCOMING_LIMIT = 5


def _owned_interviews(db: Session, user_id: str) -> Query:
    # The joined application also feeds company_name / position_title / job_url
    return (
        db.query(Interview)
        .join(Interview.application)
        .filter(Application.user_id == user_id)
        .options(contains_eager(Interview.application))
    )


def _require_owned_application(db: Session, user_id: str, application_id: str) -> Application:
    application = get_application(db, user_id, application_id)
    if application is None:
        logger.warning(f"Interview write rejected: application_id={application_id} not owned by user_id={user_id}")
        raise AccessDeniedError("Application not found or access denied")
    return application


def list_interviews(
    db: Session,
    user_id: str,
    application_id: Optional[str] = None,
    status: Optional[Union[str, InterviewStatus]] = None,
) -> List[Interview]:
    """List the user's interviews in date order, optionally for one application or status."""
    status = coerce_filter(InterviewStatus, status)
    
    query = _owned_interviews(db, user_id)
    
    if application_id:
        query = query.filter(Interview.application_id == application_id)
    
    if status is not None:
        query = query.filter(Interview.status == status)
    
    return query.order_by(Interview.interview_date.asc()).all()


def list_upcoming_interviews(db: Session, user_id: str, limit: int = DEFAULT_UPCOMING_LIMIT) -> List[Interview]:
    """Scheduled interviews from now on, soonest first, at most `limit`."""
    return (
        _owned_interviews(db, user_id)
        .filter(
            Interview.status == InterviewStatus.SCHEDULED,
            Interview.interview_date >= utcnow(),
        )
        .order_by(Interview.interview_date.asc())
        .limit(limit)
        .all()
    )


def get_interview(db: Session, user_id: str, interview_id: str) -> Optional[Interview]:
    return _owned_interviews(db, user_id).filter(Interview.id == interview_id).first()


def create_interview(db: Session, user_id: str, data: InterviewCreate) -> Interview:
    """
    Create an interview under one of the user's applications.
    
    Raises:
        AccessDeniedError: data.application_id does not resolve under user_id;
            nothing is inserted
    """
    _require_owned_application(db, user_id, data.application_id)
    
    interview = Interview(**data.model_dump())
    db.add(interview)
    db.commit()
    db.refresh(interview)
    
    logger.info(f"Interview created: id={interview.id}, application_id={interview.application_id}, user_id={user_id}")
    return interview


def update_interview(
    db: Session, user_id: str, interview_id: str, data: InterviewUpdate
) -> Optional[Interview]:
    """
    Update an interview after re-resolving ownership through its application.
    
    Raises:
        AccessDeniedError: the update moves the interview to an application the
            user does not own
    """
    interview = get_interview(db, user_id, interview_id)
    if interview is None:
        return None
    
    changes = data.changes()
    target_application_id = changes.get("application_id")
    if target_application_id and target_application_id != interview.application_id:
        _require_owned_application(db, user_id, target_application_id)
    
    for field, value in changes.items():
        setattr(interview, field, value)
    
    db.commit()
    db.refresh(interview)
    
    logger.info(f"Interview updated: id={interview.id}, user_id={user_id}")
    return interview


def delete_interview(db: Session, user_id: str, interview_id: str) -> bool:
    if get_interview(db, user_id, interview_id) is None:
        return False
    
    deleted = db.query(Interview).filter(Interview.id == interview_id).delete(synchronize_session=False)
    db.commit()
    
    logger.info(f"Interview deleted: id={interview_id}, user_id={user_id}")
    return deleted > 0
