"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from records_api.config import get_settings
from records_api.infrastructure.database import Base, engine
from records_api.infrastructure.logging.log_config import setup_logging
from records_api.presentation.api.errors import register_exception_handlers
from records_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create tables on startup; dispose the engine on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Record store ready (update=%s, delete=%s)",
        settings.record_update_policy.value,
        settings.record_delete_policy.value,
    )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "records_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
