from attire.models.user import User
from attire.models.category import Category
from attire.models.product import Product
from attire.models.cart import CartItem
from attire.models.wishlist import WishlistItem
