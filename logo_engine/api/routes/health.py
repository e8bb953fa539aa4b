"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the configured icon library cannot be loaded

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from logo_engine.core.errors import IconLibraryError
from logo_engine.infrastructure.icon_registry import get_icon_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "logo-engine-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: includes icon library availability."""
    try:
        registry = get_icon_registry()
    except IconLibraryError as e:
        logger.warning(f"Readiness failed: {e.message}", extra={"error_code": e.code})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "icon_library_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"icon_library": "healthy", "library_icons": len(registry)},
    }
