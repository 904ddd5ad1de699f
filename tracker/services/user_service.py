"""
User accounts. Deleting a user removes everything they own through the
database's foreign-key cascades.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from tracker.core.security import hash_password
from tracker.db.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def create_user(
    db: Session,
    email: str,
    password: Optional[str] = None,
    external_id: Optional[str] = None,
) -> User:
    """Create an account with a password, an external identity, or both."""
    user = User(
        email=email.lower(),
        password_hash=hash_password(password) if password else None,
        external_id=external_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    
    logger.info(f"User created: id={user.id}")
    return user


def delete_user(db: Session, user_id: str) -> bool:
    deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()
    
    if deleted:
        logger.info(f"User deleted with all owned records: id={user_id}")
    return deleted > 0
