"""
Preparation resource endpoints.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status, Query
from sqlalchemy.orm import Session

from tracker.core.auth_dependency import get_current_user_id
from tracker.core.errors import AccessDeniedError, InvalidFilterError
from tracker.db.session import get_db
from tracker.schemas.resource import ResourceCreate, ResourceUpdate, ResourceResponse
from tracker.services import resource_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resources", tags=["Resources"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ResourceResponse])
def list_resources(
    category: Optional[str] = Query(None, description="Filter by category, or 'all'"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        resources = resource_service.list_resources(db, user_id, category=category)
        return [ResourceResponse.model_validate(r) for r in resources]
    except InvalidFilterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list resources: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch resources"
        )


@router.get("/{resource_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse)
def get_resource(
    resource_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        resource = resource_service.get_resource(db, user_id, resource_id)
    except Exception as e:
        logger.error(f"Failed to get resource: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch resource"
        )
    
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return ResourceResponse.model_validate(resource)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ResourceResponse)
def create_resource(
    resource_data: ResourceCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        resource = resource_service.create_resource(db, user_id, resource_data)
        return ResourceResponse.model_validate(resource)
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create resource: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create resource"
        )


@router.patch("/{resource_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse)
def update_resource(
    resource_id: str,
    resource_data: ResourceUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        resource = resource_service.update_resource(db, user_id, resource_id, resource_data)
    except AccessDeniedError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update resource: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update resource"
        )
    
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return ResourceResponse.model_validate(resource)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resource(
    resource_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        deleted = resource_service.delete_resource(db, user_id, resource_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete resource: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete resource"
        )
    
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
