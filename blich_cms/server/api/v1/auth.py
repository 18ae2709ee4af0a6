"""
API endpoints for admin authentication.

Tokens are stateless JWTs, so logout only acknowledges the request; clients
drop the token on their side.
"""

from __future__ import annotations

from fastapi import APIRouter

from blich_cms.core.models.io.auth import AdminUserRead, LoginRequest, LoginResponse, MessageResponse
from blich_cms.server.services.deps import AuthServiceDep, CurrentAdminDep

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log In",
    description="Exchange admin credentials for a bearer token.",
    responses={401: {"description": "Invalid credentials"}},
)
async def login(data: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    return await service.login(data.email, data.password)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log Out",
)
async def logout() -> MessageResponse:
    return MessageResponse(message="Logged out")


@router.get(
    "/me",
    response_model=AdminUserRead,
    summary="Current Admin User",
    responses={401: {"description": "Missing or invalid token"}},
)
async def me(user: CurrentAdminDep) -> AdminUserRead:
    return AdminUserRead.model_validate(user)
