"""FastAPI application entry point."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from dateboard.api.routes import dates, health, kiosk
from dateboard.application.services.expiry_sweeper import ExpirySweeper
from dateboard.config import Settings, settings as default_settings
from dateboard.infrastructure.ids.scrambled_id_generator import ScrambledIdGenerator
from dateboard.infrastructure.memory.listing_store import InMemoryListingStore
from dateboard.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("dateboard_starting")
    app.state.sweeper.start()
    yield
    await app.state.sweeper.stop()
    logger.info("dateboard_stopping")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Dateboard",
        description="Password-protected short-lived postings board.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    store = InMemoryListingStore(
        ScrambledIdGenerator(key=settings.id_key, alphabet=settings.id_alphabet)
    )
    app.state.listing_store = store
    app.state.sweeper = ExpirySweeper(store, interval_seconds=settings.sweep_interval_seconds)

    app.include_router(health.router)
    app.include_router(dates.router)
    app.include_router(kiosk.router)

    return app


app = create_app()
