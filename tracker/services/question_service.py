"""
Interview question bank store.
"""
import logging
from typing import List, Optional, Union
from sqlalchemy.orm import Session

from tracker.db.models.question import Question, QuestionType
from tracker.schemas.question import QuestionCreate, QuestionUpdate
from tracker.services.filters import coerce_filter

logger = logging.getLogger(__name__)


def list_questions(
    db: Session,
    user_id: str,
    question_type: Optional[Union[str, QuestionType]] = None,
    search: Optional[str] = None,
) -> List[Question]:
    """
    List the user's questions, newest first.
    
    Args:
        question_type: Exact type, or None/"all" for every type
        search: Case-insensitive substring of the question text
    """
    question_type = coerce_filter(QuestionType, question_type)
    
    query = db.query(Question).filter(Question.user_id == user_id)
    
    if question_type is not None:
        query = query.filter(Question.question_type == question_type)
    
    if search:
        query = query.filter(Question.question_text.icontains(search, autoescape=True))
    
    return query.order_by(Question.created_at.desc()).all()


def get_question(db: Session, user_id: str, question_id: str) -> Optional[Question]:
    return db.query(Question).filter(
        Question.id == question_id,
        Question.user_id == user_id
    ).first()


def create_question(db: Session, user_id: str, data: QuestionCreate) -> Question:
    question = Question(user_id=user_id, **data.model_dump())
    db.add(question)
    db.commit()
    db.refresh(question)
    
    logger.info(f"Question created: id={question.id}, user_id={user_id}")
    return question


def update_question(
    db: Session, user_id: str, question_id: str, data: QuestionUpdate
) -> Optional[Question]:
    question = get_question(db, user_id, question_id)
    if question is None:
        return None
    
    for field, value in data.changes().items():
        setattr(question, field, value)
    
    db.commit()
    db.refresh(question)
    
    logger.info(f"Question updated: id={question.id}, user_id={user_id}")
    return question


def delete_question(db: Session, user_id: str, question_id: str) -> bool:
    deleted = db.query(Question).filter(
        Question.id == question_id,
        Question.user_id == user_id
    ).delete(synchronize_session=False)
    db.commit()
    
    if deleted:
        logger.info(f"Question deleted: id={question_id}, user_id={user_id}")
    return deleted > 0
