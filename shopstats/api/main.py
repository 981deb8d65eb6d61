"""
FastAPI Main Application
Entry point for the Shopstats API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from ..db import get_data_store
from .config import get_settings
from .errors import setup_error_handlers
from .middleware import RequestLoggingMiddleware, RequestTimingMiddleware
from .routers import (
    categories_router,
    health_router,
    orders_router,
    products_router,
    reviews_router,
    sellers_router,
    users_router,
)

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Loads the dataset on startup so the first request does not pay for it.
    """
    # Startup
    logger.info("Starting Shopstats API...")

    store = get_data_store()
    logger.info("Shopstats API started successfully", extra={"collections": store.stats()})

    yield

    # Shutdown
    logger.info("Shutting down Shopstats API...")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Create FastAPI app
    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add GZip compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Add custom middleware
    app.add_middleware(RequestTimingMiddleware, slow_request_ms=settings.slow_request_ms)
    app.add_middleware(RequestLoggingMiddleware)

    # Set up error handlers
    setup_error_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    app.include_router(reviews_router)
    app.include_router(users_router)
    app.include_router(sellers_router)

    @app.get("/")
    async def root():
        """
        Root endpoint.

        Returns:
            API information
        """
        return {
            "name": settings.app_name,
            "version": settings.version,
            "description": settings.description,
            "endpoints": {
                "health": "/health",
                "status": "/status",
                "metrics": "/metrics",
                "docs": "/docs",
                "redoc": "/redoc",
            },
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "shopstats.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
