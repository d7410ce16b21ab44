"""
Cart model

At most one line per (user_id, product_id). This is kept by merge-on-insert in
attire.services.cart_service rather than a unique constraint, and size/color
do not take part in it.
"""
from sqlalchemy import Column, Integer, String, DateTime, Index

from attire.core.database import Base
from attire.core.utils import utcnow


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    # Weak references, resolved explicitly when totals are computed
    user_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False, index=True)

    quantity = Column(Integer, nullable=False, default=1)

    # Variant selectors
    size = Column(String)
    color = Column(String)

    created_at = Column(DateTime(timezone=True), default=utcnow)

    # Composite index for the merge-on-insert lookup
    __table_args__ = (
        Index('ix_cart_items_user_product', 'user_id', 'product_id'),
    )
