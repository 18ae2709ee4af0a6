"""
API endpoints for the studio profile.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from blich_cms.core.models.io.studios import StudioRead, StudioWrite
from blich_cms.server.services.deps import StudioServiceDep, get_current_admin

router = APIRouter(tags=["studio"])
admin_router = APIRouter(tags=["admin-studio"], dependencies=[Depends(get_current_admin)])


@router.get(
    "/studio",
    response_model=StudioRead,
    summary="Get Studio",
    description="Retrieve the studio profile shown on the about page.",
    responses={404: {"description": "Studio profile not configured"}},
)
async def get_studio(service: StudioServiceDep) -> StudioRead:
    return await service.get_studio()


@admin_router.get("/studio", response_model=StudioRead, summary="Get Studio (Admin)")
async def admin_get_studio(service: StudioServiceDep) -> StudioRead:
    return await service.get_studio()


@admin_router.put(
    "/studio",
    response_model=StudioRead,
    summary="Create or Replace Studio",
    description="Create the studio profile, or replace the existing one.",
)
async def admin_put_studio(data: StudioWrite, service: StudioServiceDep) -> StudioRead:
    return await service.upsert_studio(data)
