"""
Checkout schemas
"""
from datetime import datetime
from typing import Literal
from pydantic import EmailStr, Field

from attire.schemas.base import CamelModel
from attire.schemas.cart import CartSummaryResponse


class CheckoutForm(CamelModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., min_length=10)
    address: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    pincode: str = Field(..., min_length=6)
    payment_method: Literal["cod", "card", "upi"]


class OrderConfirmationResponse(CamelModel):
    order_number: str
    status: str
    placed_at: datetime
    totals: CartSummaryResponse
