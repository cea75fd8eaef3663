"""Health check endpoint."""

import time
from fastapi import APIRouter

from talentgate.contracts import registry
from talentgate.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check: the contract registry must be loaded and sealed."""
    if not registry.sealed:
        status, message = "unhealthy", "contract registry is not sealed"
    elif len(registry) == 0:
        status, message = "degraded", "no contracts registered"
    else:
        status, message = "healthy", None

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        shapes_registered=len(registry),
        registry_sealed=registry.sealed,
        message=message,
    )
