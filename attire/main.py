"""
Attire Storefront Backend
FastAPI application entry point

- Tables are created (and the demo catalog seeded) on startup
- Storefront errors map to their HTTP status, unhandled errors are sanitized
- Auth and checkout endpoints are rate limited with SlowAPI
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from attire.api import api_router
from attire.core.config import settings
from attire.core.database import get_db_session, init_models
from attire.core.error_handler import register_error_handlers
from attire.core.rate_limit import limiter, rate_limit_exceeded_handler
from attire.services.seed import seed_initial_data

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    await init_models()
    if settings.SEED_DEMO_DATA:
        async with get_db_session() as db:
            await seed_initial_data(db)
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Catalog, cart, wishlist and checkout API for the Attire clothing store",
    version=settings.API_VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.API_VERSION,
    }


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "attire.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
