"""
API endpoints for managing articles.

Provides CRUD operations plus filtered, sorted and paginated listing of
articles. Request bodies are validated by ``ArticleService`` so that every
validation failure produces the same ``"Validation failed: ..."`` message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, Response, status

from blich_cms.core.logging_config import get_logger
from blich_cms.core.models.domain.enums import ArticleStatus, SortOrder
from blich_cms.core.models.io.articles import (
    ArticleCreated,
    ArticleFilters,
    ArticleRead,
    PaginatedArticles,
    PaginationQuery,
)
from blich_cms.server.services.deps import ArticleServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["articles"])

ARTICLE_EXAMPLE = {
    "title": "Building the studio site",
    "slug": "building-the-studio-site",
    "perex": "How we put the new website together.",
    "content": "Long form article body...",
    "authorId": "author-1",
    "status": "draft",
    "tags": ["news", "devlog"],
}


@router.get(
    "/articles",
    response_model=PaginatedArticles,
    summary="List Articles",
    description="Retrieve a page of articles, optionally filtered by status, author, tags and free text.",
    response_description="A page of articles with pagination metadata.",
    responses={
        200: {"description": "Articles retrieved successfully"},
        400: {"description": "Invalid query parameters"},
    },
)
async def list_articles(
    service: ArticleServiceDep,
    page: Optional[int] = Query(default=None, description="1-based page number"),
    limit: Optional[int] = Query(default=None, description="Page size (1-100, default 10)"),
    sort: Optional[str] = Query(default=None, description="createdAt, updatedAt, title, slug or status"),
    order: Optional[SortOrder] = Query(default=None, description="asc or desc"),
    status_filter: Optional[ArticleStatus] = Query(default=None, alias="status"),
    author_id: Optional[str] = Query(default=None, alias="authorId"),
    tags: Optional[str] = Query(default=None, description="Comma separated; matches any of the tags"),
    search: Optional[str] = Query(default=None, description="Case-insensitive text search"),
) -> PaginatedArticles:
    """
    List articles.

    - **page** / **limit**: Pagination; out-of-range values are clamped.
    - **sort** / **order**: Sort field and direction; newest first by default.
    - **status**, **authorId**, **tags**, **search**: Optional filters.
    """
    tag_list = [tag.strip() for tag in tags.split(",") if tag.strip()] if tags else None
    return await service.get_articles(
        PaginationQuery(page=page, limit=limit, sort=sort, order=order),
        ArticleFilters(status=status_filter, author_id=author_id, tags=tag_list, search=search or None),
    )


@router.get(
    "/articles/{article_id}",
    response_model=ArticleRead,
    summary="Get Article",
    description="Retrieve a single article by its 24-character hex identifier.",
    responses={
        200: {"description": "Article found"},
        400: {"description": "Invalid article ID format"},
        404: {"description": "Article not found"},
    },
)
async def get_article(article_id: str, service: ArticleServiceDep) -> ArticleRead:
    return await service.get_article_by_id(article_id)


@router.post(
    "/articles",
    response_model=ArticleCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create Article",
    description="Create a new article. Title, slug, perex, content and authorId are required.",
    response_description="The identifier of the created article.",
    responses={
        201: {"description": "Article created successfully"},
        400: {"description": "Validation failed"},
        409: {"description": "Slug already in use"},
    },
)
async def create_article(
    service: ArticleServiceDep,
    data: Dict[str, Any] = Body(..., examples=[ARTICLE_EXAMPLE]),
) -> ArticleCreated:
    """
    Create an article.

    New articles default to the ``draft`` status and an empty tag list.
    """
    created = await service.create_article(data)
    return ArticleCreated(id=created["id"])


@router.put(
    "/articles/{article_id}",
    response_model=ArticleRead,
    summary="Update Article",
    description="Merge the provided fields into an existing article and bump its update time.",
    responses={
        200: {"description": "Article updated"},
        400: {"description": "Invalid ID, invalid fields or empty update"},
        404: {"description": "Article not found"},
    },
)
async def update_article(
    article_id: str,
    service: ArticleServiceDep,
    data: Dict[str, Any] = Body(..., examples=[{"title": "A better title"}]),
) -> ArticleRead:
    return await service.update_article(article_id, data)


@router.delete(
    "/articles/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Article",
    responses={
        204: {"description": "Article deleted"},
        400: {"description": "Invalid article ID format"},
        404: {"description": "Article not found"},
    },
)
async def delete_article(article_id: str, service: ArticleServiceDep) -> Response:
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
