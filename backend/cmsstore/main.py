"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cmsstore.config import get_settings
from cmsstore.infrastructure.database import (
    create_cms_store,
    create_engine,
    store_options_from_settings,
)
from cmsstore.infrastructure.logging.log_config import setup_logging
from cmsstore.presentation.api.errors import register_exception_handlers
from cmsstore.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, migrate tables, build the store."""
    settings = get_settings()
    setup_logging(settings)

    options = store_options_from_settings(settings)
    engine = create_engine(settings.database_url)
    app.state.cms_store = await create_cms_store(engine, options)
    logger.info(
        "CMS store started (menus=%s, translations=%s, versioning=%s)",
        options.menus_enabled,
        options.translations_enabled,
        options.versioning_enabled,
    )

    yield

    # Shutdown
    app.state.cms_store = None
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
        "cmsstore.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
