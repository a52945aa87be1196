"""
Resource API - Root & Health Check Routes
===========================================

What:  GET / greeting and GET /health for monitoring and load balancer probes.
How:   /health runs SELECT 1 against the pool and reports webhook configuration.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200; the body carries the state)
"""

import logging
import time

from fastapi import APIRouter, Request

from resource_api import __version__
from resource_api.schemas.common import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_model=MessageResponse, summary="Greeting")
async def root() -> MessageResponse:
    return MessageResponse(msg="Hello! There's nothing interesting for GET /")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports database connectivity and whether webhook notifications are enabled.",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    database = getattr(request.app.state, "database", None)
    try:
        if database is None:
            raise RuntimeError("database not initialised")
        await database.verify_connection()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    notifier = getattr(request.app.state, "notifier", None)
    notifications = "enabled" if notifier is not None and notifier.enabled else "disabled"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        notifications=notifications,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
