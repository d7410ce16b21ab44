"""
Session cookie helpers

Centralized cookie handling for the login session.
"""
from typing import Optional
from fastapi import Response
from starlette.requests import Request

from attire.core.config import settings


SESSION_COOKIE = "attire_session"


def set_session_cookie(response: Response, token: str) -> None:
    """Set the HttpOnly session cookie on a response."""
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie."""
    response.delete_cookie(key=SESSION_COOKIE, path="/")


def get_session_token_from_cookie(request: Request) -> Optional[str]:
    """Extract the session token from the request cookies."""
    return request.cookies.get(SESSION_COOKIE)
