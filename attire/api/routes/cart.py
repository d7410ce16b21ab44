from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.database import get_db
from attire.models.user import User
from attire.schemas.cart import (
    CartItemCreate,
    CartItemUpdate,
    CartItemResponse,
    CartLineResponse,
    CartMergeRequest,
    CartSummaryResponse,
)
from attire.schemas.product import ProductResponse
from attire.api.deps import get_current_user
from attire.services import cart_service, checkout_service

router = APIRouter(prefix="/cart", tags=["Cart"])


def cart_line_response(line: cart_service.CartLine) -> CartLineResponse:
    item = CartItemResponse.model_validate(line.item)
    return CartLineResponse(**item.model_dump(), product=ProductResponse.model_validate(line.product))


def summary_response(totals: checkout_service.CheckoutTotals) -> CartSummaryResponse:
    return CartSummaryResponse(
        subtotal=float(totals.subtotal),
        shipping=float(totals.shipping),
        tax=float(totals.tax),
        total=float(totals.total),
        item_count=totals.item_count,
    )


@router.get("", response_model=List[CartLineResponse])
async def get_cart(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get current user's cart lines with their products."""
    lines = await cart_service.get_cart_lines(db, current_user.id)
    return [cart_line_response(line) for line in lines]


@router.get("/summary", response_model=CartSummaryResponse)
async def get_cart_summary(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Subtotal, shipping, tax and total for the current cart."""
    lines = await cart_service.get_cart_lines(db, current_user.id)
    totals = checkout_service.compute_total(
        [line.item for line in lines],
        {line.product.id: line.product for line in lines},
    )
    return summary_response(totals)


@router.post("", response_model=CartItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    item_data: CartItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Add item to cart, merging with an existing line for the same product."""
    cart_item = await cart_service.add_to_cart(
        db,
        current_user.id,
        item_data.product_id,
        quantity=item_data.quantity,
        size=item_data.size,
        color=item_data.color,
    )
    await db.commit()
    return cart_item


@router.post("/merge", response_model=List[CartLineResponse])
async def merge_cart(
    merge_data: CartMergeRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Merge an anonymous cart into the current user's cart."""
    await cart_service.merge_local_cart(db, current_user.id, merge_data.items)
    await db.commit()
    lines = await cart_service.get_cart_lines(db, current_user.id)
    return [cart_line_response(line) for line in lines]


@router.patch("/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: int,
    item_data: CartItemUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update cart item quantity."""
    cart_item = await cart_service.update_quantity(db, item_id, item_data.quantity, user_id=current_user.id)
    await db.commit()
    return cart_item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_cart(
    item_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Remove item from cart."""
    await cart_service.remove_from_cart(db, item_id, user_id=current_user.id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Clear all items from cart."""
    await cart_service.clear_cart(db, current_user.id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
