"""
Authentication routes

Rate limited to slow down credential stuffing. A successful register or login
sets the HttpOnly session cookie; login also folds the client's anonymous
cart into the server cart.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.config import settings
from attire.core.cookies import clear_session_cookie, set_session_cookie
from attire.core.database import get_db
from attire.core.exceptions import AuthenticationRequired
from attire.core.rate_limit import limiter
from attire.core.security import create_session_token
from attire.models.user import User
from attire.schemas.user import UserCreate, UserLogin, UserResponse
from attire.api.deps import get_current_user
from attire.services import cart_service, user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def register(
    request: Request,
    response: Response,
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an account and start a session."""
    user = await user_service.create_user(db, user_data)
    await db.commit()

    set_session_cookie(response, create_session_token(user.id))
    return user


@router.post("/login", response_model=UserResponse)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def login(
    request: Request,
    response: Response,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db),
):
    """Start a session and merge the anonymous cart sent by the client."""
    user = await user_service.authenticate(db, credentials.username, credentials.password)
    if not user:
        raise AuthenticationRequired("Invalid username or password")

    if credentials.cart:
        await cart_service.merge_local_cart(db, user.id, credentials.cart)
    await db.commit()

    set_session_cookie(response, create_session_token(user.id))
    logger.info(f"User {user.id} logged in")
    return user


@router.post("/logout")
async def logout(response: Response):
    """End the session."""
    clear_session_cookie(response)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
async def get_user(current_user: User = Depends(get_current_user)):
    """The logged-in user."""
    return current_user
