import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.core.auth_dependency import get_current_user_obj
from tracker.core.errors import AuthServiceUnavailableError
from tracker.core.logging_config import sanitize_log_data
from tracker.core.security import verify_password, create_access_token
from tracker.db.models.user import User
from tracker.db.session import get_db
from tracker.schemas.auth import (
    SignupRequest,
    LoginRequest,
    SignupResponse,
    TokenResponse,
    UserResponse,
)
from tracker.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _issue_token(user: User) -> str:
    try:
        return create_access_token({"sub": user.id})
    except AuthServiceUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication service unavailable"
        )


# ✅ USER SIGNUP
@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
def signup(request: SignupRequest, db: Session = Depends(get_db)):
    if user_service.get_user_by_email(db, request.email):
        logger.info(f"Signup rejected, email exists: {sanitize_log_data(request.model_dump())}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    try:
        user = user_service.create_user(db, email=request.email, password=request.password)
    except IntegrityError:
        db.rollback()
        logger.info(f"Signup lost a race on a duplicate email: {sanitize_log_data(request.model_dump())}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    return SignupResponse(user_id=user.id, access_token=_issue_token(user))


# ✅ LOGIN
@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.get_user_by_email(db, request.email)

    if not user or not verify_password(request.password, user.password_hash):
        logger.info(f"Login rejected: {sanitize_log_data(request.model_dump())}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    return TokenResponse(access_token=_issue_token(user))


@router.get("/me", response_model=UserResponse)
def read_me(user: User = Depends(get_current_user_obj)):
    return UserResponse.model_validate(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(user: User = Depends(get_current_user_obj), db: Session = Depends(get_db)):
    """Delete the account and every application, interview, resource and question it owns."""
    try:
        user_service.delete_user(db, user.id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete user: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete account"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
