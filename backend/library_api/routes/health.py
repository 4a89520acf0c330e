"""
Library API Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer health checks.
How:   Runs `SELECT 1` through a request session and reports the result.
Who:   Called by container health checks, load balancers and monitoring.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from library_api import __version__
from library_api.database import get_db_session
from library_api.schemas.book import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Process start, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the backend service and its database. "
        "Used by container health checks and load balancers."
    ),
)
async def health_check(db: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    """Check the database with `SELECT 1` and report aggregate status."""
    db_status = "connected"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))
        # Leave the session clean for the dependency's commit
        await db.rollback()

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
