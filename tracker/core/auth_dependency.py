"""
Authentication gate.

Resolves a bearer credential to a user id. Routes only ever see the resolved
id; no request proceeds without one.
"""
import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.core.errors import (
    MissingCredentialsError,
    InvalidCredentialsError,
    AuthServiceUnavailableError,
)
from tracker.core.security import decode_access_token
from tracker.db.models.user import User
from tracker.db.session import get_db

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_user_id(token: Optional[str], db: Session) -> str:
    """
    Resolve a bearer token to the id of an existing user.
    
    Raises:
        MissingCredentialsError: No token was supplied
        InvalidCredentialsError: Token is invalid, expired, or its user is gone
        AuthServiceUnavailableError: Secret missing or the user lookup failed
    """
    if not token:
        raise MissingCredentialsError("No bearer token")
    
    subject = decode_access_token(token)
    
    try:
        user_id = db.query(User.id).filter(User.id == subject).scalar()
    except SQLAlchemyError as e:
        logger.error(f"User lookup failed during authentication: {e}", exc_info=True)
        raise AuthServiceUnavailableError("User lookup failed") from e
    
    if user_id is None:
        raise InvalidCredentialsError("Token subject is not a known user")
    return user_id


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> str:
    """Resolve the caller's user id or fail with 401/401/500."""
    try:
        return resolve_user_id(credentials.credentials if credentials else None, db)
    except MissingCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidCredentialsError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthServiceUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication service unavailable",
        )


def get_current_user_obj(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    """Get the current User object for account endpoints."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    return user
