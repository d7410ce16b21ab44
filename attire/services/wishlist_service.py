"""
Wishlist Service

Per-user set of saved products. At most one entry per (user, product): adding
a product that is already saved returns the existing entry.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.exceptions import AuthenticationRequired, ValidationError
from attire.models.wishlist import WishlistItem
from attire.services import catalog_service
from attire.services.cart_service import resolve_products

logger = logging.getLogger(__name__)


async def get_entry_by_product(db: AsyncSession, user_id: int, product_id: int) -> Optional[WishlistItem]:
    result = await db.execute(
        select(WishlistItem)
        .where(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
        .order_by(WishlistItem.id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def get_wishlist(db: AsyncSession, user_id: int) -> List[tuple]:
    """(entry, product) pairs; an entry for a missing product raises IntegrityError."""
    result = await db.execute(
        select(WishlistItem).where(WishlistItem.user_id == user_id).order_by(WishlistItem.id)
    )
    entries = list(result.scalars().all())
    products = await catalog_service.get_products_by_ids(db, (entry.product_id for entry in entries))
    return resolve_products(entries, products)


async def add_to_wishlist(db: AsyncSession, user_id: int, product_id: int) -> WishlistItem:
    if await catalog_service.get_product(db, product_id) is None:
        raise ValidationError(f"Product {product_id} does not exist", field="productId")

    existing = await get_entry_by_product(db, user_id, product_id)
    if existing:
        return existing

    entry = WishlistItem(user_id=user_id, product_id=product_id)
    db.add(entry)
    await db.flush()
    return entry


async def remove_from_wishlist(db: AsyncSession, entry_id: int, user_id: Optional[int] = None) -> None:
    """Delete by entry id. Removing a missing entry is a no-op."""
    query = delete(WishlistItem).where(WishlistItem.id == entry_id)
    if user_id is not None:
        query = query.where(WishlistItem.user_id == user_id)
    await db.execute(query)


async def toggle(db: AsyncSession, user_id: Optional[int], product_id: int) -> Tuple[bool, Optional[WishlistItem]]:
    """
    Flip wishlist membership for a product.

    The entry is resolved from the product id here, so callers never need the
    entry id.

    Returns:
        (wishlisted, entry) where entry is None after a removal

    Raises:
        AuthenticationRequired: no user
        ValidationError: adding a product that does not exist
    """
    if user_id is None:
        raise AuthenticationRequired("Sign in to use the wishlist")

    existing = await get_entry_by_product(db, user_id, product_id)
    if existing:
        await remove_from_wishlist(db, existing.id, user_id)
        logger.info(f"Removed product {product_id} from wishlist of user {user_id}")
        return False, None

    entry = await add_to_wishlist(db, user_id, product_id)
    logger.info(f"Added product {product_id} to wishlist of user {user_id}")
    return True, entry
