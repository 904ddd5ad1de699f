"""
Preparation resource store.
"""
import logging
from typing import List, Optional, Union
from sqlalchemy.orm import Session

from tracker.core.errors import AccessDeniedError
from tracker.db.models.resource import Resource, ResourceCategory
from tracker.schemas.resource import ResourceCreate, ResourceUpdate
from tracker.services.application_service import get_application
from tracker.services.filters import coerce_filter

logger = logging.getLogger(__name__)


def _check_linked_application(db: Session, user_id: str, application_id: Optional[str]) -> None:
    if application_id and get_application(db, user_id, application_id) is None:
        raise AccessDeniedError("Linked application not found or access denied")


def list_resources(
    db: Session,
    user_id: str,
    category: Optional[Union[str, ResourceCategory]] = None,
) -> List[Resource]:
    """List the user's resources, newest first, optionally for one category."""
    category = coerce_filter(ResourceCategory, category)
    
    query = db.query(Resource).filter(Resource.user_id == user_id)
    if category is not None:
        query = query.filter(Resource.category == category)
    
    return query.order_by(Resource.created_at.desc()).all()


def get_resource(db: Session, user_id: str, resource_id: str) -> Optional[Resource]:
    return db.query(Resource).filter(
        Resource.id == resource_id,
        Resource.user_id == user_id
    ).first()


def create_resource(db: Session, user_id: str, data: ResourceCreate) -> Resource:
    """
    Raises:
        AccessDeniedError: linked_application_id names an application the user
            does not own
    """
    _check_linked_application(db, user_id, data.linked_application_id)
    
    resource = Resource(user_id=user_id, **data.model_dump())
    db.add(resource)
    db.commit()
    db.refresh(resource)
    
    logger.info(f"Resource created: id={resource.id}, user_id={user_id}, category={resource.category.value}")
    return resource


def update_resource(
    db: Session, user_id: str, resource_id: str, data: ResourceUpdate
) -> Optional[Resource]:
    resource = get_resource(db, user_id, resource_id)
    if resource is None:
        return None
    
    changes = data.changes()
    _check_linked_application(db, user_id, changes.get("linked_application_id"))
    
    for field, value in changes.items():
        setattr(resource, field, value)
    
    db.commit()
    db.refresh(resource)
    
    logger.info(f"Resource updated: id={resource.id}, user_id={user_id}")
    return resource


def delete_resource(db: Session, user_id: str, resource_id: str) -> bool:
    deleted = db.query(Resource).filter(
        Resource.id == resource_id,
        Resource.user_id == user_id
    ).delete(synchronize_session=False)
    db.commit()
    
    if deleted:
        logger.info(f"Resource deleted: id={resource_id}, user_id={user_id}")
    return deleted > 0
