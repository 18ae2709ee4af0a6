"""
Health Check Endpoints.

This module provides basic system status endpoints used for monitoring and
deployment verification.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from blich_cms.core.database import ping

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the CMS API.",
    response_description="Status message with the current server time.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status message to confirm the server is running and reachable.
    """
    return {"message": "CMS API is healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get(
    "/health/db",
    summary="Database Health Check",
    description="Check that the CMS database answers a trivial query.",
    response_description="Database status object.",
)
async def database_health_check():
    healthy = await ping()
    return {"database": "ok" if healthy else "unavailable"}
