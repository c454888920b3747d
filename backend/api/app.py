"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .middleware import add_robots_header
from .routes import health, config
from modules.dilemmas.routes import router as dilemmas_router
from modules.debates.routes import router as debates_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} API on {settings.host}:{settings.port} "
        f"(storage={settings.storage_backend}, llm={settings.llm_provider})"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name} API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Debate an AI opponent on legal dilemmas and get judged",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.middleware("http")(add_robots_header)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(config.router, prefix="/api", tags=["config"])
    app.include_router(dilemmas_router, prefix="/api/dilemmas", tags=["dilemmas"])
    app.include_router(debates_router, prefix="/api/debate", tags=["debates"])

    return app


# Application instance for uvicorn
app = create_app()
