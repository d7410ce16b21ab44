from fastapi import APIRouter

from attire.api.routes import auth, categories, products, cart, wishlist, checkout

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(categories.router)
api_router.include_router(products.router)
api_router.include_router(cart.router)
api_router.include_router(wishlist.router)
api_router.include_router(checkout.router)
