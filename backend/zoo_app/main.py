"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zoo_app.config import get_settings
from zoo_app.infrastructure.database import engine, init_models
from zoo_app.infrastructure.logging.log_config import setup_logging
from zoo_app.presentation.api.error_handlers import register_error_handlers
from zoo_app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create tables on startup; dispose the engine on shutdown."""
    settings = get_settings()
    setup_logging()

    await init_models()
    logger.info(
        "%s %s started (env=%s)", settings.app_title, settings.app_version, settings.app_env,
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

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "zoo_app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
