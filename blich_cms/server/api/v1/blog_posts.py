"""
API endpoints for blog posts.

The public listing is page-numbered and only shows published posts.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from blich_cms.core.models.io.auth import MessageResponse
from blich_cms.core.models.io.blog_posts import BlogPostCreate, BlogPostPage, BlogPostRead, BlogPostUpdate
from blich_cms.server.services.deps import BlogPostServiceDep, get_current_admin

router = APIRouter(tags=["blog"])
admin_router = APIRouter(tags=["admin-blog"], dependencies=[Depends(get_current_admin)])


@router.get(
    "/blog",
    response_model=BlogPostPage,
    summary="List Blog Posts",
    description="List published posts, most recently published first.",
)
async def list_blog_posts(
    service: BlogPostServiceDep,
    page: int = Query(default=1, description="1-based page number"),
    limit: int = Query(default=10, description="Posts per page (1-100)"),
) -> BlogPostPage:
    return await service.list_published(page=page, limit=limit)


@router.get(
    "/blog/{slug}",
    response_model=BlogPostRead,
    summary="Get Blog Post",
    responses={404: {"description": "No published post with this slug"}},
)
async def get_blog_post(slug: str, service: BlogPostServiceDep) -> BlogPostRead:
    return await service.get_published_post(slug)


@admin_router.get("/blog", response_model=List[BlogPostRead], summary="List All Blog Posts (Admin)")
async def admin_list_blog_posts(service: BlogPostServiceDep) -> List[BlogPostRead]:
    return await service.list_posts()


@admin_router.get(
    "/blog/{post_id}",
    response_model=BlogPostRead,
    summary="Get Blog Post by ID (Admin)",
    responses={404: {"description": "Blog post not found"}},
)
async def admin_get_blog_post(post_id: int, service: BlogPostServiceDep) -> BlogPostRead:
    return await service.get_post(post_id)


@admin_router.post(
    "/blog",
    response_model=BlogPostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Blog Post",
    description="Create a post. Publishing without `publishedAt` stamps the current time.",
    responses={409: {"description": "Slug already in use"}},
)
async def admin_create_blog_post(data: BlogPostCreate, service: BlogPostServiceDep) -> BlogPostRead:
    return await service.create_post(data)


@admin_router.put(
    "/blog/{post_id}",
    response_model=BlogPostRead,
    summary="Update Blog Post",
    responses={404: {"description": "Blog post not found"}},
)
async def admin_update_blog_post(post_id: int, data: BlogPostUpdate, service: BlogPostServiceDep) -> BlogPostRead:
    return await service.update_post(post_id, data)


@admin_router.delete(
    "/blog/{post_id}",
    response_model=MessageResponse,
    summary="Delete Blog Post",
    responses={404: {"description": "Blog post not found"}},
)
async def admin_delete_blog_post(post_id: int, service: BlogPostServiceDep) -> MessageResponse:
    await service.delete_post(post_id)
    return MessageResponse(message="Blog post deleted successfully.")
