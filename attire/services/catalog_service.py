"""
Catalog Service

Read/lookup/filter over categories and products, plus inserts used by the
product API and demo seeding.
"""
import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.exceptions import NotFound, ValidationError
from attire.models.category import Category
from attire.models.product import Product
from attire.schemas.category import CategoryCreate
from attire.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


async def list_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(Category.id))
    return list(result.scalars().all())


async def find_category_by_slug(db: AsyncSession, slug: str) -> Optional[Category]:
    result = await db.execute(select(Category).where(Category.slug == slug))
    return result.scalar_one_or_none()


async def get_category_by_slug(db: AsyncSession, slug: str) -> Category:
    category = await find_category_by_slug(db, slug)
    if not category:
        raise NotFound("Category not found", entity="category", key=slug)
    return category


async def create_category(db: AsyncSession, data: CategoryCreate) -> Category:
    if await find_category_by_slug(db, data.slug):
        raise ValidationError(f"Category slug '{data.slug}' already exists", field="slug")

    category = Category(**data.model_dump())
    db.add(category)
    await db.flush()
    return category


async def list_products(
    db: AsyncSession,
    category_slug: Optional[str] = None,
    featured: bool = False,
    trending: bool = False,
    limit: Optional[int] = None,
) -> List[Product]:
    """
    List products in insertion order.

    An unknown category slug leaves the category filter off. featured and
    trending only filter when true.
    """
    query = select(Product).order_by(Product.id)

    if category_slug:
        category = await find_category_by_slug(db, category_slug)
        if category:
            query = query.where(Product.category_id == category.id)

    if featured:
        query = query.where(Product.featured.is_(True))

    if trending:
        query = query.where(Product.trending.is_(True))

    if limit:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_product(db: AsyncSession, product_id: int) -> Optional[Product]:
    return await db.get(Product, product_id)


async def get_product_by_slug(db: AsyncSession, slug: str) -> Product:
    result = await db.execute(select(Product).where(Product.slug == slug))
    product = result.scalar_one_or_none()
    if not product:
        raise NotFound("Product not found", entity="product", key=slug)
    return product


async def get_products_by_ids(db: AsyncSession, product_ids: Iterable[int]) -> Dict[int, Product]:
    """Resolve product ids to products; ids with no product are absent."""
    ids = set(product_ids)
    if not ids:
        return {}
    result = await db.execute(select(Product).where(Product.id.in_(ids)))
    return {product.id: product for product in result.scalars().all()}


async def create_product(db: AsyncSession, data: ProductCreate) -> Product:
    existing = await db.execute(select(Product.id).where(Product.slug == data.slug))
    if existing.scalar_one_or_none() is not None:
        raise ValidationError(f"Product slug '{data.slug}' already exists", field="slug")

    values = data.model_dump()
    if values.get("description") is None:
        values["description"] = ""

    product = Product(**values)
    db.add(product)
    await db.flush()

    logger.info(f"Created product {product.id} ({product.slug})")
    return product
