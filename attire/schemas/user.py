"""
User schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field

from attire.schemas.base import CamelModel
from attire.schemas.cart import CartItemCreate


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    name: Optional[str] = Field(None, min_length=2)
    email: Optional[EmailStr] = None


class UserLogin(CamelModel):
    username: str
    password: str
    # Anonymous cart held by the client, merged on successful login
    cart: List[CartItemCreate] = []


class UserResponse(CamelModel):
    id: int
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
