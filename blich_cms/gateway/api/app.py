"""
Gateway account endpoints.
"""

from fastapi import APIRouter

from blich_cms.gateway.core.auth import CurrentClaimsDep

router = APIRouter(tags=["account"])


@router.get("/profile", summary="Current Token Profile", responses={401: {"description": "Missing or invalid token"}})
async def get_profile(claims: CurrentClaimsDep):
    """Return the identity carried by the bearer token."""
    return {"userId": claims["sub"], "username": claims.get("username")}


@router.get("/public", summary="Public Endpoint")
async def get_public():
    return {"message": "This is public"}
