"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - No readiness variant: the service has no backing dependencies to check
"""

from fastapi import APIRouter, status

from bmi_api import __version__

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "bmi-api",
        "version": __version__,
    }
