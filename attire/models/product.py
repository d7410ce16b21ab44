"""
Product model

category_id is a weak reference: there is no foreign key and no cascade, so
deleting a category leaves its products orphaned.
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text, JSON, Numeric, CheckConstraint

from attire.core.database import Base
from attire.core.utils import utcnow


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, default="")

    # Pricing in whole rupees
    price = Column(Numeric(10, 2), nullable=False)
    original_price = Column(Numeric(10, 2))
    discount = Column(Float)  # Percent off original_price

    category_id = Column(Integer, nullable=False, index=True)

    # Ordered image references
    images = Column(JSON, default=list)

    inventory = Column(Integer, default=0)
    featured = Column(Boolean, default=False)
    trending = Column(Boolean, default=False)
    rating = Column(Float, default=0.0)
    review_count = Column(Integer, default=0)

    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_products_rating_range"),
    )
