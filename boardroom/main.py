"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from boardroom.api.errors import register_error_handlers
from boardroom.api.health import router as health_router
from boardroom.api.router import api_router
from boardroom.config import settings
from boardroom.storage import MemoryStorage
from boardroom.storage.seed import seed_demo_data

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Construct the in-memory storage
    - Optionally seed demo data

    Shutdown:
    - Nothing to release; in-memory state is discarded
    """
    logger.info("Starting Board Portal...")

    storage = MemoryStorage()
    app.state.storage = storage
    logger.info("In-memory storage initialized")

    if settings.seed_demo_data:
        await seed_demo_data(storage)
        logger.info("Demo data loaded")

    yield

    logger.info("Shutting down Board Portal...")


app = FastAPI(
    title=settings.app_name,
    description="Meetings, members, documents and action items for boards",
    version=settings.app_version,
    lifespan=lifespan,
)

register_error_handlers(app)
app.include_router(health_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "boardroom.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
