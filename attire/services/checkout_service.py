"""
Checkout Service

Stateless order totals over cart contents and a simulated order placement.

    shipping = 0 if subtotal >= FREE_SHIPPING_THRESHOLD else SHIPPING_FEE
    tax      = round(subtotal * TAX_RATE)   (one half-up rounding, whole rupees)
    total    = subtotal + shipping + tax

Placing an order waits a fixed delay and returns a display order number.
Nothing is persisted, the cart is left as is and inventory is untouched.
"""
import asyncio
import enum
import logging
import random
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

from attire.core.config import settings
from attire.core.exceptions import StorefrontError, ValidationError
from attire.core.utils import utcnow
from attire.services.cart_service import LineLike, PriceLike, compute_item_count, compute_subtotal, to_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutTotals:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal
    item_count: int


@dataclass(frozen=True)
class OrderConfirmation:
    order_number: str
    placed_at: datetime
    totals: CheckoutTotals
    status: str = "confirmed"


class CheckoutState(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    FAILED = "failed"


def compute_shipping(subtotal: Decimal, threshold=None, fee=None) -> Decimal:
    threshold = to_money(settings.FREE_SHIPPING_THRESHOLD if threshold is None else threshold)
    fee = to_money(settings.SHIPPING_FEE if fee is None else fee)
    return Decimal("0") if subtotal >= threshold else fee


def compute_tax(subtotal: Decimal, rate=None) -> Decimal:
    rate = to_money(settings.TAX_RATE if rate is None else rate)
    return (subtotal * rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def compute_total(
    lines: Iterable[LineLike],
    products: Mapping[int, PriceLike],
    threshold=None,
    fee=None,
    rate=None,
) -> CheckoutTotals:
    lines = list(lines)
    subtotal = compute_subtotal(lines, products)
    shipping = compute_shipping(subtotal, threshold, fee)
    tax = compute_tax(subtotal, rate)
    return CheckoutTotals(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
        item_count=compute_item_count(lines),
    )


def generate_order_number() -> str:
    return f"{settings.ORDER_NUMBER_PREFIX}-{random.randint(0, 9999)}"


async def place_order(
    lines: Iterable[LineLike],
    products: Mapping[int, PriceLike],
    delay_seconds: Optional[float] = None,
) -> OrderConfirmation:
    """
    Simulate placing an order for the given cart.

    Raises:
        ValidationError: the cart is empty
    """
    lines = list(lines)
    if not lines:
        raise ValidationError("Your cart is empty", field="cart")

    totals = compute_total(lines, products)

    delay = settings.CHECKOUT_SIMULATED_DELAY_SECONDS if delay_seconds is None else delay_seconds
    if delay > 0:
        await asyncio.sleep(delay)

    confirmation = OrderConfirmation(
        order_number=generate_order_number(),
        placed_at=utcnow(),
        totals=totals,
    )
    logger.info(
        f"Order {confirmation.order_number} confirmed: "
        f"{totals.item_count} item(s), total {totals.total}"
    )
    return confirmation


class CheckoutFlow:
    """
    Checkout state machine.

        IDLE → SUBMITTING → CONFIRMED   (terminal)
                          → FAILED → IDLE

    FAILED keeps the error on .error. Submitting again from FAILED goes back
    through IDLE; nothing is retried automatically.
    """

    def __init__(self):
        self.state = CheckoutState.IDLE
        self.error: Optional[StorefrontError] = None
        self.confirmation: Optional[OrderConfirmation] = None

    async def submit(
        self,
        lines: Iterable[LineLike],
        products: Mapping[int, PriceLike],
        delay_seconds: Optional[float] = None,
    ) -> OrderConfirmation:
        if self.state is CheckoutState.FAILED:
            self.reset()
        if self.state is not CheckoutState.IDLE:
            raise ValidationError(f"Cannot submit checkout while {self.state.value}", field="checkout")

        self.state = CheckoutState.SUBMITTING
        self.error = None
        try:
            self.confirmation = await place_order(lines, products, delay_seconds)
        except StorefrontError as e:
            self.state = CheckoutState.FAILED
            self.error = e
            logger.info(f"Checkout failed: {e.message}")
            raise

        self.state = CheckoutState.CONFIRMED
        return self.confirmation

    def reset(self) -> None:
        """Return a failed flow to IDLE."""
        if self.state is CheckoutState.FAILED:
            self.state = CheckoutState.IDLE
