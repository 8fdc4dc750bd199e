"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.cache import RedisCache

from .config import get_settings
from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import auth, courses, health, orders, users

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting LearnHub API on {settings.host}:{settings.port}")
    yield
    # Shutdown
    cache = get_container().cache
    if isinstance(cache, RedisCache):
        await cache.close()
    logger.info("Shutting down LearnHub API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="LearnHub API",
        description="Learning platform accounts, sessions and course catalog",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix=API_PREFIX, tags=["auth"])
    app.include_router(users.router, prefix=API_PREFIX, tags=["users"])
    app.include_router(courses.router, prefix=API_PREFIX, tags=["courses"])
    app.include_router(orders.router, prefix=API_PREFIX, tags=["orders"])

    return app


# Application instance for uvicorn
app = create_app()
