"""
Wishlist model
"""
from sqlalchemy import Column, Integer, DateTime, Index

from attire.core.database import Base
from attire.core.utils import utcnow


class WishlistItem(Base):
    __tablename__ = "wishlist_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        Index('ix_wishlist_items_user_product', 'user_id', 'product_id'),
    )
