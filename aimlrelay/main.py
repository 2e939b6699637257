"""
Main FastAPI application.

Following Sandi Metz:
- Single Responsibility: Application setup and configuration
- Small methods: Each lifecycle stage isolated
- Clear naming: Descriptive function names
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from aimlrelay import __version__
from aimlrelay.api.routes import answer, health
from aimlrelay.config import config
from aimlrelay.utils.logger import get_logger, setup_logging

setup_logging(config.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info(
        "Starting AIMLRelay",
        env=config.app_env,
        default_model=config.default_model,
        proxy=config.has_proxy,
    )
    yield
    logger.info("Shutting down AIMLRelay")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=config.app_name,
        version=__version__,
        docs_url="/docs" if config.is_development else None,
        redoc_url="/redoc" if config.is_development else None,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(answer.router, prefix="/api/v1", tags=["answer"])

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aimlrelay.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.is_development,
    )
