"""
Health check endpoint.

Sandi Metz Principles:
- Single Responsibility: Health check logic only
"""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from aimlrelay import __version__
from aimlrelay.config import config

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"] = Field(..., description="Service status")
    app: str = Field(..., description="Application name")
    environment: str = Field(..., description="Environment name")
    version: str = Field(..., description="Application version")


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report service liveness."""
    return HealthResponse(
        status="healthy",
        app=config.app_name,
        environment=config.app_env,
        version=__version__,
    )
