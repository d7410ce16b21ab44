"""
Cart schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from attire.schemas.base import CamelModel
from attire.schemas.product import ProductResponse


class CartItemCreate(CamelModel):
    product_id: int
    quantity: int = Field(1, ge=1)
    size: Optional[str] = None
    color: Optional[str] = None


class CartItemUpdate(CamelModel):
    quantity: int = Field(..., ge=1)


class CartMergeRequest(CamelModel):
    items: List[CartItemCreate] = []


class CartItemResponse(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    created_at: Optional[datetime] = None


class CartLineResponse(CartItemResponse):
    product: ProductResponse


class CartSummaryResponse(CamelModel):
    subtotal: float
    shipping: float
    tax: float
    total: float
    item_count: int
