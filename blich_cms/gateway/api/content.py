"""
CMS content proxy endpoints.

Relays public site content from the CMS unchanged. Upstream failures are
re-raised with the upstream status code and error body; an unreachable CMS
answers 502.
"""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from fastapi import APIRouter, HTTPException, Query, status

from blich_cms.core.logging_config import get_logger
from blich_cms.gateway.cms_client import CmsApiError

from .deps import CmsClientDep

logger = get_logger(__name__)

router = APIRouter(tags=["content"])


async def _proxy(call: Awaitable[Any]) -> Any:
    try:
        return await call
    except CmsApiError as e:
        logger.warning(f"CMS proxy request failed: {e.message}")
        raise HTTPException(
            status_code=e.status_code or status.HTTP_502_BAD_GATEWAY,
            detail=e.details if e.details is not None else "CMS request failed",
        ) from e


@router.get("/games", summary="Get all games from CMS")
async def get_games(
    client: CmsClientDep,
    published: Optional[bool] = Query(default=None, description="Forwarded to the CMS as-is"),
):
    return await _proxy(client.list_games(published=published))


@router.get("/games/{slug}", summary="Get single game from CMS")
async def get_game(slug: str, client: CmsClientDep):
    return await _proxy(client.get_game(slug))


@router.get("/blog", summary="Get all blog posts from CMS")
async def get_blog_posts(
    client: CmsClientDep,
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
):
    return await _proxy(client.list_blog_posts(page=page, limit=limit))


@router.get("/blog/{slug}", summary="Get single blog post from CMS")
async def get_blog_post(slug: str, client: CmsClientDep):
    return await _proxy(client.get_blog_post(slug))
