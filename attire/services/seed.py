"""
Demo catalog

Loaded at startup when SEED_DEMO_DATA is on. Seeding is skipped once any
category or product exists.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from attire.models.category import Category
from attire.models.product import Product
from attire.schemas.category import CategoryCreate
from attire.schemas.product import ProductCreate
from attire.services import catalog_service

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com"

DEMO_CATEGORIES = [
    {"name": "Men", "slug": "men", "image": f"{UNSPLASH}/photo-1550246140-29f40b909e5a?q=80&w=600", "description": "Men's Fashion"},
    {"name": "Women", "slug": "women", "image": f"{UNSPLASH}/photo-1485968579580-b6d095142e6e?q=80&w=600", "description": "Women's Fashion"},
    {"name": "Kids", "slug": "kids", "image": f"{UNSPLASH}/photo-1624435990733-aca957d0bbcf?q=80&w=600", "description": "Kids Fashion"},
    {"name": "Ethnic", "slug": "ethnic", "image": f"{UNSPLASH}/photo-1610030469668-76cd682c6e53?q=80&w=600", "description": "Ethnic Wear"},
    {"name": "Western", "slug": "western", "image": f"{UNSPLASH}/photo-1539109136881-3be0616acf4b?q=80&w=600", "description": "Western Wear"},
    {"name": "Accessories", "slug": "accessories", "image": f"{UNSPLASH}/photo-1601821765780-754fa98637c1?q=80&w=600", "description": "Fashion Accessories"},
]

# category is the slug of one of DEMO_CATEGORIES
DEMO_PRODUCTS = [
    {
        "name": "Floral Summer Dress",
        "slug": "floral-summer-dress",
        "description": "A beautiful floral summer dress perfect for warm weather.",
        "price": 1999, "original_price": 2499, "discount": 20,
        "category": "women",
        "images": [
            f"{UNSPLASH}/photo-1623609163859-ca93c959b98a?q=80&w=600",
            f"{UNSPLASH}/photo-1612336307429-8a898d10e223?q=80&w=600",
            f"{UNSPLASH}/photo-1572804013427-4d7ca7268217?q=80&w=600",
        ],
        "inventory": 45, "featured": True, "trending": True, "rating": 4.5, "review_count": 124,
    },
    {
        "name": "Men's Mint Striped Shirt",
        "slug": "mens-mint-striped-shirt",
        "description": (
            "Premium mint green striped shirt crafted with soft fabric for a relaxed, stylish "
            "summer look. Perfect for beach holidays and casual outings."
        ),
        "price": 1499, "original_price": 1999, "discount": 25,
        "category": "men",
        "images": ["/assets/mint-striped-shirt.png"] * 3,
        "inventory": 78, "featured": True, "trending": True, "rating": 4.9, "review_count": 112,
    },
    {
        "name": "Embroidered Lehenga",
        "slug": "embroidered-lehenga",
        "description": "A stunning embroidered lehenga for special occasions.",
        "price": 4999, "original_price": 7999, "discount": 38,
        "category": "ethnic",
        "images": [
            f"{UNSPLASH}/photo-1598359007833-f8a3ecfccee6?q=80&w=600",
            f"{UNSPLASH}/photo-1600488999785-a12f63eb5a16?q=80&w=600",
            f"{UNSPLASH}/photo-1600488999872-fb78426ee27f?q=80&w=600",
        ],
        "inventory": 32, "featured": True, "trending": False, "rating": 4.0, "review_count": 42,
    },
    {
        "name": "Classic White Shirt",
        "slug": "classic-white-shirt",
        "description": "A timeless white shirt for formal and casual occasions.",
        "price": 999, "original_price": 1299, "discount": 23,
        "category": "western",
        "images": [
            f"{UNSPLASH}/photo-1624835020714-f9521e3e1421?q=80&w=600",
            f"{UNSPLASH}/photo-1563630423918-b58f07336ac9?q=80&w=600",
            f"{UNSPLASH}/photo-1577381450259-a0e1f56a85a6?q=80&w=600",
        ],
        "inventory": 120, "featured": False, "trending": False, "rating": 5.0, "review_count": 215,
    },
    {
        "name": "Kids Casual T-Shirt",
        "slug": "kids-casual-t-shirt",
        "description": "Comfortable and colorful t-shirt for kids.",
        "price": 499, "original_price": 699, "discount": 29,
        "category": "kids",
        "images": [
            f"{UNSPLASH}/photo-1476344305746-32062f10f791?q=80&w=600",
            f"{UNSPLASH}/photo-1535572290543-960a8046f5af?q=80&w=600",
            f"{UNSPLASH}/photo-1540479859555-17af45c78602?q=80&w=600",
        ],
        "inventory": 85, "featured": True, "trending": False, "rating": 4.7, "review_count": 63,
    },
    {
        "name": "Handcrafted Earrings",
        "slug": "handcrafted-earrings",
        "description": "Beautiful handcrafted earrings to complement your ethnic wear.",
        "price": 799, "original_price": 1199, "discount": 33,
        "category": "accessories",
        "images": [
            f"{UNSPLASH}/photo-1588444837495-c6cfeb53f32d?q=80&w=600",
            f"{UNSPLASH}/photo-1598224572873-f81da0bf1222?q=80&w=600",
            f"{UNSPLASH}/photo-1633810541031-84d98b471cae?q=80&w=600",
        ],
        "inventory": 54, "featured": False, "trending": True, "rating": 4.8, "review_count": 97,
    },
    {
        "name": "Women's Designer Saree",
        "slug": "womens-designer-saree",
        "description": "Elegant designer saree for special occasions.",
        "price": 3999, "original_price": 5999, "discount": 33,
        "category": "ethnic",
        "images": [
            f"{UNSPLASH}/photo-1610030469668-76cd682c6e53?q=80&w=600",
            f"{UNSPLASH}/photo-1611042553484-d61f84d22784?q=80&w=600",
            f"{UNSPLASH}/photo-1603400521630-9f2de124b33b?q=80&w=600",
        ],
        "inventory": 40, "featured": True, "trending": True, "rating": 4.9, "review_count": 124,
    },
    {
        "name": "Men's Slim Fit Jeans",
        "slug": "mens-slim-fit-jeans",
        "description": "Comfortable slim fit jeans for a modern look.",
        "price": 1299, "original_price": 1799, "discount": 28,
        "category": "western",
        "images": [
            f"{UNSPLASH}/photo-1541099649105-f69ad21f3246?q=80&w=600",
            f"{UNSPLASH}/photo-1555689502-c4b22d76c56f?q=80&w=600",
            f"{UNSPLASH}/photo-1542060748-10c28b62716f?q=80&w=600",
        ],
        "inventory": 95, "featured": False, "trending": True, "rating": 4.6, "review_count": 78,
    },
]


async def seed_initial_data(db: AsyncSession) -> bool:
    """Insert the demo catalog into an empty store. Returns True if it seeded."""
    categories = await db.scalar(select(func.count(Category.id)))
    products = await db.scalar(select(func.count(Product.id)))
    if categories or products:
        return False

    category_ids = {}
    for data in DEMO_CATEGORIES:
        category = await catalog_service.create_category(db, CategoryCreate(**data))
        category_ids[category.slug] = category.id

    for data in DEMO_PRODUCTS:
        values = dict(data)
        values["category_id"] = category_ids[values.pop("category")]
        await catalog_service.create_product(db, ProductCreate(**values))

    logger.info(f"Seeded {len(DEMO_CATEGORIES)} categories and {len(DEMO_PRODUCTS)} products")
    return True
