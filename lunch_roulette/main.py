"""
FastAPI application setup.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from lunch_roulette.config import get_settings
from lunch_roulette.config.settings import AzureMapsSettings, env_files
from lunch_roulette.core.error_handlers import setup_error_handlers
from lunch_roulette.core.logging import configure_logging
from lunch_roulette.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the service holds no resources between requests."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if not AzureMapsSettings(_env_file=env_files()).subscription_key:
        logger.warning("Azure Maps subscription key is not set; searches will fail upstream")
    yield
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from lunch_roulette.api import health_router, restaurant_router
    app.include_router(restaurant_router)
    app.include_router(health_router)

    return app


# Create application instance
app = create_app()
