"""
Anonymous cart held by the client before login.

Mirrors the server cart semantics: adding a product already in the cart
increments that line. Line ids are negative so they can never be mistaken for
stored cart item ids. On login the lines are sent to the server and merged
with cart_service.merge_local_cart.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Mapping, Optional

from attire.core.exceptions import NotFound
from attire.services.cart_service import PriceLike, compute_item_count, compute_subtotal


@dataclass
class LocalCartLine:
    id: int
    product_id: int
    quantity: int = 1
    size: Optional[str] = None
    color: Optional[str] = None


@dataclass
class LocalCart:
    _lines: Dict[int, LocalCartLine] = field(default_factory=dict)
    _next_id: int = -1

    @property
    def lines(self) -> List[LocalCartLine]:
        return list(self._lines.values())

    def _find_by_product(self, product_id: int) -> Optional[LocalCartLine]:
        for line in self._lines.values():
            if line.product_id == product_id:
                return line
        return None

    def add(
        self,
        product_id: int,
        quantity: Optional[int] = None,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> LocalCartLine:
        quantity = 1 if quantity is None else quantity

        existing = self._find_by_product(product_id)
        if existing:
            existing.quantity += quantity
            return existing

        line = LocalCartLine(
            id=self._next_id,
            product_id=product_id,
            quantity=quantity,
            size=size,
            color=color,
        )
        self._lines[line.id] = line
        self._next_id -= 1
        return line

    def update_quantity(self, line_id: int, quantity: int) -> LocalCartLine:
        line = self._lines.get(line_id)
        if line is None:
            raise NotFound("Cart item not found", entity="local_cart_line", key=line_id)
        line.quantity = quantity
        return line

    def remove(self, line_id: int) -> None:
        self._lines.pop(line_id, None)

    def clear(self) -> None:
        self._lines.clear()

    def subtotal(self, products: Mapping[int, PriceLike]) -> Decimal:
        return compute_subtotal(self.lines, products)

    def item_count(self) -> int:
        return compute_item_count(self.lines)

    def to_merge_payload(self) -> List[dict]:
        """Lines in the shape accepted by POST /api/login and /api/cart/merge."""
        return [
            {
                "productId": line.product_id,
                "quantity": line.quantity,
                "size": line.size,
                "color": line.color,
            }
            for line in self.lines
        ]
