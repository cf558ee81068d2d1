"""
Production FastAPI Application

    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    # Schema comes from ORM metadata (no migration tooling)
    await create_db_and_tables()
    Logger.base.info('🗄️  [Ticketing Service] Database tables ready')

    Logger.base.info('✅ [Ticketing Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ticketing Service] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [Ticketing Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Event Ticketing System - browse events, purchase seats, check in, and report sales',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
