import logging
import bcrypt
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError, ExpiredSignatureError

from tracker.core import config
from tracker.core.errors import InvalidCredentialsError, AuthServiceUnavailableError

logger = logging.getLogger(__name__)

# passlib verifies hashes written before bcrypt was called directly
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt ignores everything past 72 bytes
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.
    
    Args:
        password: Plain text password (max 72 bytes in UTF-8)
        
    Returns:
        Hashed password string (bcrypt format compatible with passlib)
        
    Raises:
        ValueError: If password cannot be hashed
    """
    try:
        return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")
    except ValueError as e:
        logger.error(f"Password hashing failed (ValueError): {e}")
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """
    Verify a password against its hash.
    
    Accounts created through an external identity provider have no hash and
    never verify.
    """
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        logger.debug("bcrypt rejected stored hash, retrying through passlib")
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        logger.warning("Stored password hash is in an unrecognised format")
        return False


def _require_secret() -> str:
    if not config.SECRET_KEY:
        logger.error("SECRET_KEY is not configured; cannot sign or verify tokens")
        raise AuthServiceUnavailableError("Signing secret is not configured")
    return config.SECRET_KEY


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, _require_secret(), algorithm=config.ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Decode a bearer token and return its subject (the user id).
    
    Raises:
        InvalidCredentialsError: Signature, expiry or claims are not acceptable
        AuthServiceUnavailableError: The signing secret is missing
    """
    secret = _require_secret()
    try:
        payload = jwt.decode(token, secret, algorithms=[config.ALGORITHM])
    except ExpiredSignatureError as e:
        raise InvalidCredentialsError("Token expired") from e
    except JWTError as e:
        raise InvalidCredentialsError("Token could not be decoded") from e

    subject = payload.get("sub")
    if not subject:
        raise InvalidCredentialsError("Token has no subject")
    return str(subject)
