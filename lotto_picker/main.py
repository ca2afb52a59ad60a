"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from loguru import logger

from lotto_picker.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add("logs/app.log", rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)
    Path("logs").mkdir(exist_ok=True)

    from lotto_picker.db.engine import create_tables
    await create_tables()

    yield

    from lotto_picker.db.engine import engine
    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Historical lottery statistics and weighted number picks",
    lifespan=lifespan,
)

# Include API routers
from lotto_picker.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
