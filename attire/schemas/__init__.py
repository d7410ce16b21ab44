from attire.schemas.category import CategoryCreate, CategoryResponse
from attire.schemas.product import ProductCreate, ProductResponse
from attire.schemas.cart import (
    CartItemCreate,
    CartItemUpdate,
    CartMergeRequest,
    CartItemResponse,
    CartLineResponse,
    CartSummaryResponse,
)
from attire.schemas.wishlist import (
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistLineResponse,
    WishlistToggleResponse,
)
from attire.schemas.user import UserCreate, UserLogin, UserResponse
from attire.schemas.checkout import CheckoutForm, OrderConfirmationResponse
