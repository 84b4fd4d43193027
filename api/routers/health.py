"""Health check endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.config import get_settings

router = APIRouter(tags=["Health"])

API_VERSION = "0.1.0"

# Track server start time for uptime calculation
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    env: str = Field(..., description="Deployment environment")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check; does not touch the network or Redis."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=API_VERSION,
        env=get_settings().env,
        uptime_seconds=int(time.time() - _server_start_time),
    )
