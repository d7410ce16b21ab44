"""
Checkout routes

Order placement is simulated: no order is stored and the cart is not cleared.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from attire.core.config import settings
from attire.core.database import get_db
from attire.core.rate_limit import limiter
from attire.models.user import User
from attire.schemas.checkout import CheckoutForm, OrderConfirmationResponse
from attire.api.deps import get_current_user
from attire.api.routes.cart import summary_response
from attire.services import cart_service, checkout_service

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.post("", response_model=OrderConfirmationResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_CHECKOUT)
async def place_order(
    request: Request,
    form: CheckoutForm,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Validate the checkout form and confirm a simulated order for the current cart."""
    lines = await cart_service.get_cart_lines(db, current_user.id)

    flow = checkout_service.CheckoutFlow()
    confirmation = await flow.submit(
        [line.item for line in lines],
        {line.product.id: line.product for line in lines},
    )

    return OrderConfirmationResponse(
        order_number=confirmation.order_number,
        status=flow.state.value,
        placed_at=confirmation.placed_at,
        totals=summary_response(confirmation.totals),
    )
