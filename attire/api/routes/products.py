from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.database import get_db
from attire.schemas.product import ProductCreate, ProductResponse
from attire.services import catalog_service

router = APIRouter(prefix="/products", tags=["Products"])


def parse_limit(value: Optional[str]) -> Optional[int]:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None


@router.get("", response_model=List[ProductResponse])
async def list_products(
    category: Optional[str] = None,
    featured: Optional[str] = None,
    trending: Optional[str] = None,
    limit: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    List products, optionally filtered by category slug, featured or trending.

    Only the literal "true" turns a flag filter on. A limit that is not a
    positive integer leaves the list unsliced.
    """
    return await catalog_service.list_products(
        db,
        category_slug=category,
        featured=featured == "true",
        trending=trending == "true",
        limit=parse_limit(limit),
    )


@router.get("/{slug}", response_model=ProductResponse)
async def get_product(slug: str, db: AsyncSession = Depends(get_db)):
    """Product by slug."""
    return await catalog_service.get_product_by_slug(db, slug)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(product_data: ProductCreate, db: AsyncSession = Depends(get_db)):
    """Create a product."""
    product = await catalog_service.create_product(db, product_data)
    await db.commit()
    return product
