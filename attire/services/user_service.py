"""
User Service

Account creation and username/password authentication.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.exceptions import ValidationError
from attire.core.security import get_password_hash, verify_password
from attire.models.user import User
from attire.schemas.user import UserCreate

logger = logging.getLogger(__name__)


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    if await get_user_by_username(db, data.username):
        raise ValidationError("Username already exists", field="username")

    user = User(
        username=data.username,
        hashed_password=get_password_hash(data.password),
        name=data.name,
        email=data.email,
    )
    db.add(user)
    await db.flush()

    logger.info(f"Registered user {user.id} ({user.username})")
    return user


async def authenticate(db: AsyncSession, username: str, password: str) -> Optional[User]:
    user = await get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        logger.info(f"Failed login for username {username!r}")
        return None
    return user
