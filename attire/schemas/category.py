"""
Category schemas
"""
from typing import Optional

from attire.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str
    slug: str
    image: Optional[str] = None
    description: Optional[str] = None


class CategoryResponse(CategoryCreate):
    id: int
