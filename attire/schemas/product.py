"""
Product schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from attire.schemas.base import CamelModel


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    discount: Optional[float] = Field(None, ge=0, le=100)
    category_id: int
    images: List[str] = []
    inventory: int = Field(0, ge=0)
    featured: bool = False
    trending: bool = False
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)


class ProductResponse(CamelModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    price: float
    original_price: Optional[float] = None
    discount: Optional[float] = None
    category_id: int
    images: List[str] = []
    inventory: int = 0
    featured: bool = False
    trending: bool = False
    rating: float = 0
    review_count: int = 0
    created_at: Optional[datetime] = None
