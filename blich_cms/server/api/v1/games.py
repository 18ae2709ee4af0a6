"""
API endpoints for showcased assets ("games").

``router`` serves the public site (published assets only unless asked
otherwise); ``admin_router`` holds the authenticated management endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from blich_cms.core.models.io.assets import AssetCreate, AssetRead, AssetUpdate
from blich_cms.core.models.io.auth import MessageResponse
from blich_cms.server.services.deps import AssetServiceDep, get_current_admin

router = APIRouter(tags=["games"])
admin_router = APIRouter(tags=["admin-games"], dependencies=[Depends(get_current_admin)])


@router.get(
    "/games",
    response_model=List[AssetRead],
    summary="List Games",
    description="List showcased assets newest first. Only published ones unless `published=false`.",
)
async def list_games(
    service: AssetServiceDep,
    published: bool = Query(default=True, description="Only return published assets"),
) -> List[AssetRead]:
    return await service.list_assets(published_only=published)


@router.get(
    "/games/{slug}",
    response_model=AssetRead,
    summary="Get Game",
    description="Retrieve a published asset by its slug.",
    responses={404: {"description": "No published asset with this slug"}},
)
async def get_game(slug: str, service: AssetServiceDep) -> AssetRead:
    return await service.get_published_asset(slug)


@admin_router.get("/games", response_model=List[AssetRead], summary="List All Games (Admin)")
async def admin_list_games(service: AssetServiceDep) -> List[AssetRead]:
    return await service.list_assets(published_only=False)


@admin_router.get(
    "/games/{asset_id}",
    response_model=AssetRead,
    summary="Get Game by ID (Admin)",
    responses={404: {"description": "Asset not found"}},
)
async def admin_get_game(asset_id: int, service: AssetServiceDep) -> AssetRead:
    return await service.get_asset(asset_id)


@admin_router.post(
    "/games",
    response_model=AssetRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Game",
    responses={
        201: {"description": "Asset created"},
        400: {"description": "Invalid asset data"},
        409: {"description": "Slug already in use"},
    },
)
async def admin_create_game(data: AssetCreate, service: AssetServiceDep) -> AssetRead:
    return await service.create_asset(data)


@admin_router.put(
    "/games/{asset_id}",
    response_model=AssetRead,
    summary="Update Game",
    description="Merge the provided fields into an existing asset.",
    responses={404: {"description": "Asset not found"}},
)
async def admin_update_game(asset_id: int, data: AssetUpdate, service: AssetServiceDep) -> AssetRead:
    return await service.update_asset(asset_id, data)


@admin_router.delete(
    "/games/{asset_id}",
    response_model=MessageResponse,
    summary="Delete Game",
    responses={404: {"description": "Asset not found"}},
)
async def admin_delete_game(asset_id: int, service: AssetServiceDep) -> MessageResponse:
    await service.delete_asset(asset_id)
    return MessageResponse(message="Asset deleted successfully")
