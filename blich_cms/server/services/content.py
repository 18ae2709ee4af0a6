"""
Content services for the studio website.

Assets ("games"), blog posts and the studio profile. Public reads only ever
see published content; admin operations see everything.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List

from sqlalchemy.exc import IntegrityError

from blich_cms.core.database.base import utc_now
from blich_cms.core.database.entities.assets import Asset
from blich_cms.core.database.entities.blog_posts import BlogPost
from blich_cms.core.database.entities.studios import Studio
from blich_cms.core.database.repositories.assets import AssetRepository
from blich_cms.core.database.repositories.blog_posts import BlogPostRepository
from blich_cms.core.database.repositories.studios import StudioRepository
from blich_cms.core.errors import ConflictError, NotFoundError
from blich_cms.core.logging_config import get_logger
from blich_cms.core.models.domain.enums import BlogPostStatus
from blich_cms.core.models.io.assets import AssetCreate, AssetRead, AssetUpdate
from blich_cms.core.models.io.blog_posts import (
    BlogPostCreate,
    BlogPostPage,
    BlogPostRead,
    BlogPostUpdate,
    PageMeta,
)
from blich_cms.core.models.io.studios import StudioRead, StudioWrite

logger = get_logger(__name__)

MAX_PAGE_SIZE = 100
# Keeps the row offset inside a 64-bit integer
MAX_PAGE = 100_000


def _merge(entity: Any, changes: Dict[str, Any], required: Iterable[str]) -> None:
    """Apply a partial update, ignoring explicit nulls for non-nullable columns."""
    required = set(required)
    for key, value in changes.items():
        if value is None and key in required:
            continue
        setattr(entity, key, value)


class AssetService:
    """Showcased assets: public listing plus admin CRUD."""

    REQUIRED_FIELDS = ("title", "slug", "description", "screenshots", "type", "status", "platforms", "links", "published")

    def __init__(self, repository: AssetRepository):
        self.repository = repository

    async def list_assets(self, published_only: bool = True) -> List[AssetRead]:
        assets = await (self.repository.list_published() if published_only else self.repository.list())
        return [AssetRead.model_validate(asset) for asset in assets]

    async def get_published_asset(self, slug: str) -> AssetRead:
        asset = await self.repository.get_by_slug(slug, published_only=True)
        if asset is None:
            raise NotFoundError("Asset")
        return AssetRead.model_validate(asset)

    async def get_asset(self, asset_id: int) -> AssetRead:
        return AssetRead.model_validate(await self._get(asset_id))

    async def create_asset(self, data: AssetCreate) -> AssetRead:
        asset = Asset(**data.model_dump(mode="python", exclude={"links"}), links=data.links.model_dump(exclude_none=True))
        try:
            created = await self.repository.create(asset)
        except IntegrityError as e:
            raise ConflictError("Asset with this slug already exists") from e
        logger.info(f"Asset created: id={created.id} slug={created.slug}")
        return AssetRead.model_validate(created)

    async def update_asset(self, asset_id: int, data: AssetUpdate) -> AssetRead:
        asset = await self._get(asset_id)
        changes = data.model_dump(mode="python", exclude_unset=True)
        if changes.get("links") is not None:
            changes["links"] = data.links.model_dump(exclude_none=True)
        _merge(asset, changes, self.REQUIRED_FIELDS)
        try:
            updated = await self.repository.update(asset)
        except IntegrityError as e:
            raise ConflictError("Asset with this slug already exists") from e
        logger.info(f"Asset updated: id={asset_id}")
        return AssetRead.model_validate(updated)

    async def delete_asset(self, asset_id: int) -> None:
        if not await self.repository.delete(asset_id):
            raise NotFoundError("Asset")
        logger.info(f"Asset deleted: id={asset_id}")

    async def _get(self, asset_id: int) -> Asset:
        asset = await self.repository.get_by_id(asset_id)
        if asset is None:
            raise NotFoundError("Asset")
        return asset


class BlogPostService:
    """Blog posts: paginated public listing plus admin CRUD."""

    REQUIRED_FIELDS = ("title", "slug", "content", "tags", "status")

    def __init__(self, repository: BlogPostRepository):
        self.repository = repository

    async def list_published(self, page: int = 1, limit: int = 10) -> BlogPostPage:
        """
        Get one page of published posts, most recently published first.

        Args:
            page: 1-based page number, clamped to 1..100000
            limit: Page size, clamped to 1..100

        Returns:
            Page envelope with ``meta`` and ``data``
        """
        page = min(MAX_PAGE, max(1, page))
        limit = min(MAX_PAGE_SIZE, max(1, limit))
        posts, total = await self.repository.paginate_published(page, limit)
        return BlogPostPage(
            meta=PageMeta(
                total=total,
                per_page=limit,
                current_page=page,
                last_page=max(1, math.ceil(total / limit)),
                first_page=1,
            ),
            data=[BlogPostRead.model_validate(post) for post in posts],
        )

    async def get_published_post(self, slug: str) -> BlogPostRead:
        post = await self.repository.get_by_slug(slug, published_only=True)
        if post is None:
            raise NotFoundError("Blog post")
        return BlogPostRead.model_validate(post)

    async def list_posts(self) -> List[BlogPostRead]:
        return [BlogPostRead.model_validate(post) for post in await self.repository.list()]

    async def get_post(self, post_id: int) -> BlogPostRead:
        return BlogPostRead.model_validate(await self._get(post_id))

    async def create_post(self, data: BlogPostCreate) -> BlogPostRead:
        post = BlogPost(**data.model_dump(mode="python"))
        self._stamp_published(post)
        try:
            created = await self.repository.create(post)
        except IntegrityError as e:
            raise ConflictError("Blog post with this slug already exists") from e
        logger.info(f"Blog post created: id={created.id} slug={created.slug}")
        return BlogPostRead.model_validate(created)

    async def update_post(self, post_id: int, data: BlogPostUpdate) -> BlogPostRead:
        post = await self._get(post_id)
        _merge(post, data.model_dump(mode="python", exclude_unset=True), self.REQUIRED_FIELDS)
        self._stamp_published(post)
        try:
            updated = await self.repository.update(post)
        except IntegrityError as e:
            raise ConflictError("Blog post with this slug already exists") from e
        logger.info(f"Blog post updated: id={post_id}")
        return BlogPostRead.model_validate(updated)

    async def delete_post(self, post_id: int) -> None:
        if not await self.repository.delete(post_id):
            raise NotFoundError("Blog post")
        logger.info(f"Blog post deleted: id={post_id}")

    async def _get(self, post_id: int) -> BlogPost:
        post = await self.repository.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Blog post")
        return post

    @staticmethod
    def _stamp_published(post: BlogPost) -> None:
        # Published posts always carry a publication time
        if post.status == BlogPostStatus.published.value and post.published_at is None:
            post.published_at = utc_now()


class StudioService:
    """The single studio profile."""

    def __init__(self, repository: StudioRepository):
        self.repository = repository

    async def get_studio(self) -> StudioRead:
        studio = await self.repository.get_current()
        if studio is None:
            raise NotFoundError("Studio")
        return StudioRead.model_validate(studio)

    async def upsert_studio(self, data: StudioWrite) -> StudioRead:
        """Create the studio profile, or replace the existing one."""
        values = data.model_dump(mode="python", exclude_none=True)
        values["team_members"] = [member.model_dump(exclude_none=True) for member in data.team_members]
        values["social_links"] = data.social_links.model_dump(exclude_none=True)

        studio = await self.repository.get_current()
        if studio is None:
            saved = await self.repository.create(Studio(**values))
            logger.info(f"Studio profile created: id={saved.id}")
        else:
            values.setdefault("logo", None)
            for key, value in values.items():
                setattr(studio, key, value)
            saved = await self.repository.update(studio)
            logger.info(f"Studio profile updated: id={saved.id}")
        return StudioRead.model_validate(saved)
