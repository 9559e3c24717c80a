"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the record source cannot load (readiness)
    - Neither probe requires the access token
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from usersearch.api.dependencies import get_record_source
from usersearch.core.errors import RecordSourceError
from usersearch.core.repository_protocols import RecordSource

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "user-search-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(source: RecordSource = Depends(get_record_source)):
    """Readiness probe: the dataset must load."""
    try:
        records = await asyncio.to_thread(source.load)
    except RecordSourceError as e:
        logger.warning(f"Readiness check failed: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "record_source_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"record_source": "healthy", "records": len(records)},
    }
