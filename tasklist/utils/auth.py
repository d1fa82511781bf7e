from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import uuid4

from jose import JWTError, jwt

from tasklist.core.config import settings
from tasklist.core.logging import logger
from tasklist.schemas.auth import Token


# JWT Authentication Utilities
def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> Token:
    """Creates a new JWT access token.

    Args:
        subject: The unique identifier of the user
        expires_delta: Optional custom expiration time
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=settings.JWT_ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = {
        "sub": subject,
        "exp": expire,
        "iat": now,
        # JTI (JWT ID): a unique identifier for this specific token instance
        "jti": uuid4().hex,
    }
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    logger.debug("access_token_issued", subject=subject)

    return Token(access_token=encoded_jwt, expires_at=expire)


def verify_token(token: str) -> Optional[str]:
    """
    Decodes and verifies a JWT token. Returns the subject (User ID) if valid.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        # If the signature is invalid or token is expired, jose raises JWTError
        logger.warning("invalid_or_expired_token", error=str(e))
        return None

    subject = payload.get("sub")
    if not subject:
        return None
    return str(subject)
