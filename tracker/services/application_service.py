"""
Application store.

Every read and write is scoped to the owning user; a record that exists but
belongs to someone else is reported exactly like a missing one.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional, Union
from sqlalchemy import or_
from sqlalchemy.orm import Session

from tracker.db.base import utcnow
from tracker.db.models.application import Application, ApplicationStatus
from tracker.schemas.application import ApplicationCreate, ApplicationUpdate
from tracker.services.filters import coerce_filter

logger = logging.getLogger(__name__)


def _next_updated_at(previous: Optional[datetime]) -> datetime:
    # Strictly later than the previous stamp even within one clock tick
    now = utcnow()
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


def list_applications(
    db: Session,
    user_id: str,
    status: Optional[Union[str, ApplicationStatus]] = None,
    search: Optional[str] = None,
) -> List[Application]:
    """
    List the user's applications, most recent application date first.
    
    Args:
        db: Database session
        user_id: Owner ID
        status: Exact status, or None/"all" for every status
        search: Case-insensitive substring of company name or position title
        
    Raises:
        InvalidFilterError: status is not a known application status
    """
    status = coerce_filter(ApplicationStatus, status)
    
    query = db.query(Application).filter(Application.user_id == user_id)
    
    if status is not None:
        query = query.filter(Application.status == status)
    
    if search:
        query = query.filter(
            or_(
                Application.company_name.icontains(search, autoescape=True),
                Application.position_title.icontains(search, autoescape=True),
            )
        )
    
    return query.order_by(Application.application_date.desc(), Application.created_at.desc()).all()


def get_application(db: Session, user_id: str, application_id: str) -> Optional[Application]:
    """Return the application only if it exists and belongs to user_id."""
    return db.query(Application).filter(
        Application.id == application_id,
        Application.user_id == user_id
    ).first()


def create_application(db: Session, user_id: str, data: ApplicationCreate) -> Application:
    application = Application(user_id=user_id, **data.model_dump())
    db.add(application)
    db.commit()
    db.refresh(application)
    
    logger.info(f"Application created: id={application.id}, user_id={user_id}, company={application.company_name}")
    return application


def update_application(
    db: Session, user_id: str, application_id: str, data: ApplicationUpdate
) -> Optional[Application]:
    """
    Apply the fields present in `data` and refresh `updated_at`.
    
    Returns None when the application does not exist under user_id. Status is
    a label: any status may replace any other.
    """
    application = get_application(db, user_id, application_id)
    if application is None:
        return None
    
    for field, value in data.changes().items():
        setattr(application, field, value)
    application.updated_at = _next_updated_at(application.updated_at)
    
    db.commit()
    db.refresh(application)
    
    logger.info(f"Application updated: id={application.id}, user_id={user_id}")
    return application


def delete_application(db: Session, user_id: str, application_id: str) -> bool:
    """
    Delete an application owned by user_id.
    
    The database removes its interviews and clears resource links to it.
    """
    deleted = db.query(Application).filter(
        Application.id == application_id,
        Application.user_id == user_id
    ).delete(synchronize_session=False)
    db.commit()
    
    if deleted:
        logger.info(f"Application deleted: id={application_id}, user_id={user_id}")
    return deleted > 0
