"""
Health Check Endpoints of the gateway.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API gateway.",
    response_description="Status object.",
)
async def health_check():
    return {"status": "ok", "service": "blich-gateway"}
