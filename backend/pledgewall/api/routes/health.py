"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the pledge store is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pledgewall.core.repository_protocols import PledgeStore
from pledgewall.infrastructure.pledge_store_factory import get_pledge_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "pledgewall-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: PledgeStore = Depends(get_pledge_store)):
    """Readiness probe — includes pledge store connectivity."""
    store_ok = await store.health_check()
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
                "backend": store.backend_name,
            },
        )
    return {"status": "ready", "checks": {store.backend_name: "healthy"}}
