"""
Question bank endpoints.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status, Query
from sqlalchemy.orm import Session

from tracker.core.auth_dependency import get_current_user_id
from tracker.core.errors import InvalidFilterError
from tracker.db.session import get_db
from tracker.schemas.question import QuestionCreate, QuestionUpdate, QuestionResponse
from tracker.services import question_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["Questions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[QuestionResponse])
def list_questions(
    question_type: Optional[str] = Query(None, alias="type", description="Filter by question type, or 'all'"),
    search: Optional[str] = Query(None, description="Search the question text"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        questions = question_service.list_questions(db, user_id, question_type=question_type, search=search)
        return [QuestionResponse.model_validate(q) for q in questions]
    except InvalidFilterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list questions: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch questions"
        )


@router.get("/{question_id}", status_code=status.HTTP_200_OK, response_model=QuestionResponse)
def get_question(
    question_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        question = question_service.get_question(db, user_id, question_id)
    except Exception as e:
        logger.error(f"Failed to get question: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question"
        )
    
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return QuestionResponse.model_validate(question)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=QuestionResponse)
def create_question(
    question_data: QuestionCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        question = question_service.create_question(db, user_id, question_data)
        return QuestionResponse.model_validate(question)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create question: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question"
        )


@router.patch("/{question_id}", status_code=status.HTTP_200_OK, response_model=QuestionResponse)
def update_question(
    question_id: str,
    question_data: QuestionUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        question = question_service.update_question(db, user_id, question_id, question_data)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update question: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update question"
        )
    
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return QuestionResponse.model_validate(question)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_question(
    question_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        deleted = question_service.delete_question(db, user_id, question_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete question: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete question"
        )
    
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
