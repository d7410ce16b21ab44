from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.database import get_db
from attire.schemas.category import CategoryResponse
from attire.services import catalog_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """All categories."""
    return await catalog_service.list_categories(db)


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str, db: AsyncSession = Depends(get_db)):
    """Category by slug."""
    return await catalog_service.get_category_by_slug(db, slug)
