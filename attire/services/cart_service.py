"""
Cart Service

Maintains the authoritative set of cart lines per user.

Reconciliation: adding a product that is already in the user's cart increments
the existing line instead of creating a second one, so there is at most one
line per (user, product). Size and color are not part of that key; a second
add in another size increments the first line and keeps its variant.

Totals are pure functions over lines and a product lookup, shared with the
anonymous LocalCart.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Mapping, NamedTuple, Optional, Protocol

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.exceptions import IntegrityError, NotFound, ValidationError
from attire.models.cart import CartItem
from attire.models.product import Product
from attire.services import catalog_service

logger = logging.getLogger(__name__)


class LineLike(Protocol):
    product_id: int
    quantity: int


class PriceLike(Protocol):
    price: object


class CartLine(NamedTuple):
    item: CartItem
    product: Product


def to_money(value) -> Decimal:
    """Convert a stored price (Decimal, float or int) to Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def resolve_products(lines: Iterable[LineLike], products: Mapping[int, PriceLike]) -> List[tuple]:
    """
    Pair every line with its product.

    Raises:
        IntegrityError: a line references a product that does not exist
    """
    pairs = []
    for line in lines:
        product = products.get(line.product_id)
        if product is None:
            entity = getattr(line, "__tablename__", "cart_item")
            entity_id = getattr(line, "id", None)
            raise IntegrityError(
                f"Product {line.product_id} referenced by {entity} #{entity_id} does not exist",
                entity=entity,
                entity_id=entity_id,
                missing="product",
                missing_id=line.product_id,
            )
        pairs.append((line, product))
    return pairs


def compute_subtotal(lines: Iterable[LineLike], products: Mapping[int, PriceLike]) -> Decimal:
    """Sum of quantity * price over lines. Orphaned lines raise IntegrityError."""
    return sum(
        (to_money(product.price) * line.quantity for line, product in resolve_products(lines, products)),
        Decimal("0"),
    )


def compute_item_count(lines: Iterable[LineLike]) -> int:
    """Sum of quantities across lines."""
    return sum(line.quantity for line in lines)


async def get_cart_item(db: AsyncSession, cart_item_id: int, user_id: Optional[int] = None) -> Optional[CartItem]:
    query = select(CartItem).where(CartItem.id == cart_item_id)
    if user_id is not None:
        query = query.where(CartItem.user_id == user_id)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_cart_item_by_product(db: AsyncSession, user_id: int, product_id: int) -> Optional[CartItem]:
    result = await db.execute(
        select(CartItem)
        .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
        .order_by(CartItem.id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def get_cart_items(db: AsyncSession, user_id: int) -> List[CartItem]:
    result = await db.execute(
        select(CartItem).where(CartItem.user_id == user_id).order_by(CartItem.id)
    )
    return list(result.scalars().all())


async def get_cart_lines(db: AsyncSession, user_id: int) -> List[CartLine]:
    """
    The user's cart lines with their products.

    Raises:
        IntegrityError: a line references a product that no longer exists
    """
    items = await get_cart_items(db, user_id)
    products = await catalog_service.get_products_by_ids(db, (item.product_id for item in items))
    return [CartLine(item, product) for item, product in resolve_products(items, products)]


async def add_to_cart(
    db: AsyncSession,
    user_id: int,
    product_id: int,
    quantity: Optional[int] = None,
    size: Optional[str] = None,
    color: Optional[str] = None,
) -> CartItem:
    """
    Add a product to the user's cart, merging into an existing line.

    The merged quantity is not checked against inventory.

    Raises:
        ValidationError: the product does not exist
    """
    if await catalog_service.get_product(db, product_id) is None:
        raise ValidationError(f"Product {product_id} does not exist", field="productId")

    quantity = 1 if quantity is None else quantity

    existing = await get_cart_item_by_product(db, user_id, product_id)
    if existing:
        existing.quantity = existing.quantity + quantity
        await db.flush()
        logger.info(
            f"Merged product {product_id} into cart line {existing.id} "
            f"for user {user_id} (quantity now {existing.quantity})"
        )
        return existing

    cart_item = CartItem(
        user_id=user_id,
        product_id=product_id,
        quantity=quantity,
        size=size,
        color=color,
    )
    db.add(cart_item)
    await db.flush()
    logger.info(f"Added product {product_id} to cart of user {user_id} as line {cart_item.id}")
    return cart_item


async def update_quantity(
    db: AsyncSession,
    cart_item_id: int,
    quantity: int,
    user_id: Optional[int] = None,
) -> CartItem:
    """
    Replace a line's quantity.

    Quantities below 1 are rejected by the API schema, not here.

    Raises:
        NotFound: no such line (for this user, when user_id is given)
    """
    cart_item = await get_cart_item(db, cart_item_id, user_id)
    if not cart_item:
        raise NotFound("Cart item not found", entity="cart_item", key=cart_item_id)

    cart_item.quantity = quantity
    await db.flush()
    return cart_item


async def remove_from_cart(db: AsyncSession, cart_item_id: int, user_id: Optional[int] = None) -> None:
    """Delete a line. Removing a missing line is a no-op."""
    query = delete(CartItem).where(CartItem.id == cart_item_id)
    if user_id is not None:
        query = query.where(CartItem.user_id == user_id)
    await db.execute(query)


async def clear_cart(db: AsyncSession, user_id: int) -> None:
    await db.execute(delete(CartItem).where(CartItem.user_id == user_id))
    logger.info(f"Cleared cart of user {user_id}")


async def merge_local_cart(db: AsyncSession, user_id: int, local_lines: Iterable) -> int:
    """
    Fold an anonymous cart into the user's server cart.

    Every local line goes through add_to_cart, so products already in the
    server cart have their quantities summed. Lines for products that no
    longer exist are skipped. Returns the number of lines merged; the cart is
    not resolved here, so a stale line already in it does not fail the merge.
    """
    merged = 0
    for line in local_lines:
        try:
            await add_to_cart(
                db,
                user_id,
                line.product_id,
                quantity=line.quantity,
                size=line.size,
                color=line.color,
            )
        except ValidationError:
            logger.warning(f"Skipped unknown product {line.product_id} while merging cart of user {user_id}")
            continue
        merged += 1

    if merged:
        logger.info(f"Merged {merged} local cart line(s) into cart of user {user_id}")
    return merged
