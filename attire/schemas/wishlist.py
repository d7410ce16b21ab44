"""
Wishlist schemas
"""
from datetime import datetime
from typing import Optional

from attire.schemas.base import CamelModel
from attire.schemas.product import ProductResponse


class WishlistItemCreate(CamelModel):
    product_id: int


class WishlistItemResponse(CamelModel):
    id: int
    user_id: int
    product_id: int
    created_at: Optional[datetime] = None


class WishlistLineResponse(WishlistItemResponse):
    product: ProductResponse


class WishlistToggleResponse(CamelModel):
    wishlisted: bool
    item: Optional[WishlistItemResponse] = None
