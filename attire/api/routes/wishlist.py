from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.database import get_db
from attire.models.user import User
from attire.schemas.product import ProductResponse
from attire.schemas.wishlist import (
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistLineResponse,
    WishlistToggleResponse,
)
from attire.api.deps import get_current_user
from attire.services import wishlist_service

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])


@router.get("", response_model=List[WishlistLineResponse])
async def get_wishlist(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get current user's wishlist with products."""
    pairs = await wishlist_service.get_wishlist(db, current_user.id)
    return [
        WishlistLineResponse(
            **WishlistItemResponse.model_validate(entry).model_dump(),
            product=ProductResponse.model_validate(product),
        )
        for entry, product in pairs
    ]


@router.post("", response_model=WishlistItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(
    item_data: WishlistItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Save a product. Saving it again returns the existing entry."""
    entry = await wishlist_service.add_to_wishlist(db, current_user.id, item_data.product_id)
    await db.commit()
    return entry


@router.post("/toggle", response_model=WishlistToggleResponse)
async def toggle_wishlist(
    item_data: WishlistItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Save or unsave a product by product id."""
    wishlisted, entry = await wishlist_service.toggle(db, current_user.id, item_data.product_id)
    await db.commit()
    return WishlistToggleResponse(
        wishlisted=wishlisted,
        item=WishlistItemResponse.model_validate(entry) if entry else None,
    )


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_wishlist(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Remove a wishlist entry by its id."""
    await wishlist_service.remove_from_wishlist(db, entry_id, user_id=current_user.id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
