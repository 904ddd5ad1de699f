"""
Application endpoints.

CRUD for tracked job applications plus the derived status statistics.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status, Query
from sqlalchemy.orm import Session

from tracker.core.auth_dependency import get_current_user_id
from tracker.core.errors import InvalidFilterError
from tracker.db.session import get_db
from tracker.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
    ApplicationStats,
)
from tracker.services import application_service, stats_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["Applications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ApplicationResponse])
def list_applications(
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status, or 'all'"),
    search: Optional[str] = Query(None, description="Search company name and position title"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's applications, most recent application date first."""
    try:
        applications = application_service.list_applications(
            db, user_id, status=status_filter, search=search
        )
        return [ApplicationResponse.model_validate(a) for a in applications]
    except InvalidFilterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list applications: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch applications"
        )


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=ApplicationStats)
def get_application_stats(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Total applications and per-status counts for the caller."""
    try:
        return ApplicationStats(**stats_service.get_application_stats(db, user_id))
    except Exception as e:
        logger.error(f"Failed to compute stats: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch stats"
        )


@router.get("/{application_id}", status_code=status.HTTP_200_OK, response_model=ApplicationResponse)
def get_application(
    application_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get one application.
    
    Returns 404 if it does not exist or belongs to someone else.
    """
    try:
        application = application_service.get_application(db, user_id, application_id)
    except Exception as e:
        logger.error(f"Failed to get application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch application"
        )
    
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return ApplicationResponse.model_validate(application)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationResponse)
def create_application(
    application_data: ApplicationCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create an application owned by the caller."""
    try:
        application = application_service.create_application(db, user_id, application_data)
        return ApplicationResponse.model_validate(application)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create application"
        )


@router.patch("/{application_id}", status_code=status.HTTP_200_OK, response_model=ApplicationResponse)
def update_application(
    application_id: str,
    application_data: ApplicationUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Update an application.
    
    Only provided fields change. Returns 404 if not found or not owned.
    """
    try:
        application = application_service.update_application(db, user_id, application_id, application_data)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application"
        )
    
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete an application together with its interviews."""
    try:
        deleted = application_service.delete_application(db, user_id, application_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete application"
        )
    
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
