"""
Pytest configuration and fixtures for the storefront tests.

Every test that asks for the database gets a fresh in-memory SQLite store:
tables are created up front and the engine is disposed afterwards, which
drops the single StaticPool connection and with it all data.
"""
import os
from typing import AsyncGenerator, Dict

import pytest

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-only"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["COOKIE_SECURE"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["CHECKOUT_SIMULATED_DELAY_SECONDS"] = "0"

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from attire.core.database import AsyncSessionLocal, engine, init_models  # noqa: E402
from attire.models.category import Category  # noqa: E402
from attire.models.product import Product  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def database() -> AsyncGenerator[None, None]:
    """Create tables on a fresh in-memory database."""
    await init_models()
    yield
    await engine.dispose()


@pytest.fixture
async def db(database) -> AsyncGenerator[AsyncSession, None]:
    """Session on the fresh database."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, sharing the test database."""
    from attire.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
async def catalog(db: AsyncSession) -> Dict[str, Product]:
    """
    Two categories and three products.

    tee (500, women, featured), jeans (1299, men, trending),
    scarf (999, women, featured + trending)
    """
    women = Category(name="Women", slug="women", description="Women's Fashion")
    men = Category(name="Men", slug="men", description="Men's Fashion")
    db.add_all([women, men])
    await db.flush()

    products = {
        "tee": Product(
            name="Cotton Tee", slug="cotton-tee", description="", price=500,
            category_id=women.id, images=["/img/tee.png"], inventory=10,
            featured=True, trending=False, rating=4.2, review_count=12,
        ),
        "jeans": Product(
            name="Slim Jeans", slug="slim-jeans", description="", price=1299,
            category_id=men.id, images=[], inventory=5,
            featured=False, trending=True, rating=4.6, review_count=40,
        ),
        "scarf": Product(
            name="Silk Scarf", slug="silk-scarf", description="", price=999,
            category_id=women.id, images=[], inventory=3,
            featured=True, trending=True, rating=5.0, review_count=3,
        ),
    }
    db.add_all(products.values())
    await db.commit()
    return products


async def register(client: AsyncClient, username: str = "asha", password: str = "secret123") -> dict:
    """Register a user and return Authorization headers for it."""
    resp = await client.post(
        "/api/register",
        json={"username": username, "password": password, "name": "Asha Rao", "email": "asha@example.com"},
    )
    assert resp.status_code == 201, resp.text
    token = resp.cookies["attire_session"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict:
    return await register(client)


@pytest.fixture
def register_user(client: AsyncClient):
    """Factory for additional users: await register_user("name")."""
    async def _register(username: str, password: str = "secret123") -> dict:
        return await register(client, username=username, password=password)
    return _register
