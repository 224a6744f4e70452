# src/reservation_usage/api/app.py
"""
FastAPI application factory for the reservation usage API.

Uses the factory pattern so the app can be created with or without
lifespan management (e.g., tests skip releasing the EC2 clients).
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from reservation_usage import __version__
from reservation_usage.api.routers import config as config_router
from reservation_usage.api.routers import usage
from reservation_usage.core.config import config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown."""
    from reservation_usage.core.factory import get_collector

    logger.info("Starting reservation usage API...")
    collector = get_collector()
    yield
    logger.info("Shutting down reservation usage API...")
    await collector.close()


def create_app(use_lifespan: bool = False) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        use_lifespan: If True, attach the lifespan handler that owns the
                      process-wide collector. Set to False for testing.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="Reservation Usage API",
        description="Running EC2 capacity against reserved instances, per instance family.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan if use_lifespan else None,
    )

    app.include_router(usage.router, prefix="/api/v1", tags=["Usage"])
    app.include_router(config_router.router, prefix="/api/v1", tags=["Config"])

    return app


def main(host: str = None, port: int = None):
    """Entry point for the reservation-usage-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app(use_lifespan=True)
    uvicorn.run(app, host=host or config.API_HOST, port=port or config.API_PORT)
