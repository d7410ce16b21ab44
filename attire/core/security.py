"""
Security utilities - password hashing, session tokens

Session tokens are signed JWTs carried in an HttpOnly cookie (see
attire.core.cookies). The "type" claim separates them from any other
token the service might issue.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from attire.core.config import settings

SESSION_TOKEN_TYPE = "session"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8")
    )


def get_password_hash(password: str) -> str:
    """Generate password hash"""
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt()
    ).decode("utf-8")


def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed session token for a user id"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.SESSION_EXPIRE_MINUTES))
    to_encode = {
        # RFC 7519: sub is a string
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
        "type": SESSION_TOKEN_TYPE,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """Decode and validate a token, None if invalid or expired"""
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError:
        return None


def get_session_user_id(token: str) -> Optional[int]:
    """Return the user id carried by a valid session token."""
    payload = decode_token(token)
    if not payload or payload.get("type") != SESSION_TOKEN_TYPE:
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
