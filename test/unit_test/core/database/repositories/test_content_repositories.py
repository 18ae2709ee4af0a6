"""
Unit tests for the asset, blog post and admin user repositories.
"""

from datetime import datetime

import pytest

from blich_cms.core.database.entities.admin_users import AdminUser
from blich_cms.core.database.entities.assets import Asset
from blich_cms.core.database.entities.blog_posts import BlogPost
from blich_cms.core.database.repositories import AdminUserRepository, AssetRepository, BlogPostRepository

pytestmark = pytest.mark.asyncio


class TestAssetRepository:
    async def test_published_only_slug_lookup(self, session):
        repository = AssetRepository(session)
        await repository.create(Asset(title="Draft", slug="draft", description="d"))
        await repository.create(Asset(title="Live", slug="live", description="d", published=True))

        assert await repository.get_by_slug("draft", published_only=True) is None
        assert (await repository.get_by_slug("draft")).title == "Draft"
        assert [a.slug for a in await repository.list_published()] == ["live"]


class TestBlogPostRepository:
    async def test_paginate_published(self, session):
        repository = BlogPostRepository(session)
        for day in (1, 2, 3):
            await repository.create(
                BlogPost(
                    title=f"Post {day}",
                    slug=f"post-{day}",
                    content="c",
                    status="published",
                    published_at=datetime(2024, 1, day),
                )
            )
        await repository.create(BlogPost(title="Draft", slug="draft", content="c"))

        posts, total = await repository.paginate_published(page=1, per_page=2)

        assert total == 3
        assert [p.slug for p in posts] == ["post-3", "post-2"]


class TestAdminUserRepository:
    async def test_get_by_email_normalizes(self, session):
        repository = AdminUserRepository(session)
        await repository.create(AdminUser(email="admin@blich.studio", password_hash="x"))

        assert (await repository.get_by_email("  Admin@Blich.Studio ")).email == "admin@blich.studio"
        assert await repository.get_by_email("other@blich.studio") is None
