"""
API dependencies

The session token is read from the HttpOnly cookie, with an
Authorization: Bearer header accepted for API clients.
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.cookies import get_session_token_from_cookie
from attire.core.database import get_db
from attire.core.exceptions import AuthenticationRequired
from attire.core.security import get_session_user_id
from attire.models.user import User
from attire.services import user_service

# Optional bearer - doesn't fail if no Authorization header
security = HTTPBearer(auto_error=False)


def get_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
) -> Optional[str]:
    """Authorization header first, then the session cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return get_session_token_from_cookie(request)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """Get current user if authenticated, None otherwise"""
    token = get_token_from_request(request, credentials)
    if not token:
        return None

    user_id = get_session_user_id(token)
    if user_id is None:
        return None

    return await user_service.get_user(db, user_id)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Get current authenticated user or fail with 401."""
    if user is None:
        raise AuthenticationRequired("Not authenticated")
    return user
