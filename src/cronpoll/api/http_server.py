"""FastAPI HTTP server setup."""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from ..config import Settings, settings as default_settings
from ..scheduler import CronScheduler
from .endpoints import router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None,
               scheduler: Optional[CronScheduler] = None) -> FastAPI:
    """Create the application, owning the poll scheduler for its lifetime.

    Raises:
        InvalidScheduleError: If the poller is enabled and the configured
            schedule expression is invalid.
    """
    if settings is None:
        settings = default_settings

    if scheduler is None and settings.poller_enabled:
        scheduler = CronScheduler.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger.info("Starting cronpoll server...")
        app.state.scheduler = scheduler
        if scheduler:
            scheduler.start()

        yield

        logger.info("Shutting down cronpoll server...")
        if scheduler:
            await scheduler.shutdown()

    app = FastAPI(
        title="cronpoll",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.include_router(router)
    return app
