"""
Interview endpoints.

Ownership is checked through each interview's application.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status, Query
from sqlalchemy.orm import Session

from tracker.core.auth_dependency import get_current_user_id
from tracker.core.errors import AccessDeniedError, InvalidFilterError
from tracker.db.session import get_db
from tracker.schemas.interview import (
    InterviewCreate,
    InterviewUpdate,
    InterviewResponse,
    InterviewDetailResponse,
)
from tracker.services import interview_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/interviews", tags=["Interviews"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[InterviewDetailResponse])
def list_interviews(
    application_id: Optional[str] = Query(None, alias="applicationId", description="Only this application's interviews"),
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by interview status"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's interviews with company and position of each application."""
    try:
        interviews = interview_service.list_interviews(
            db, user_id, application_id=application_id, status=status_filter
        )
        return [InterviewDetailResponse.model_validate(i) for i in interviews]
    except InvalidFilterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list interviews: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch interviews"
        )


@router.get("/upcoming", status_code=status.HTTP_200_OK, response_model=List[InterviewDetailResponse])
def list_upcoming_interviews(
    limit: int = Query(interview_service.DEFAULT_UPCOMING_LIMIT, ge=1, le=100, description="Maximum interviews"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Scheduled interviews from now on, soonest first."""
    try:
        interviews = interview_service.list_upcoming_interviews(db, user_id, limit=limit)
        return [InterviewDetailResponse.model_validate(i) for i in interviews]
    except Exception as e:
        logger.error(f"Failed to list upcoming interviews: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch upcoming interviews"
        )


@router.get("/{interview_id}", status_code=status.HTTP_200_OK, response_model=InterviewResponse)
def get_interview(
    interview_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        interview = interview_service.get_interview(db, user_id, interview_id)
    except Exception as e:
        logger.error(f"Failed to get interview: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch interview"
        )
    
    if interview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return InterviewResponse.model_validate(interview)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InterviewResponse)
def create_interview(
    interview_data: InterviewCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Schedule an interview.
    
    Returns 400 if applicationId is not one of the caller's applications.
    """
    try:
        interview = interview_service.create_interview(db, user_id, interview_data)
        return InterviewResponse.model_validate(interview)
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create interview: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create interview"
        )


@router.patch("/{interview_id}", status_code=status.HTTP_200_OK, response_model=InterviewResponse)
def update_interview(
    interview_id: str,
    interview_data: InterviewUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        interview = interview_service.update_interview(db, user_id, interview_id, interview_data)
    except AccessDeniedError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update interview: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update interview"
        )
    
    if interview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return InterviewResponse.model_validate(interview)


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview(
    interview_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        deleted = interview_service.delete_interview(db, user_id, interview_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete interview: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete interview"
        )
    
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
