"""
Unit tests for the asset, blog post and studio services against in-memory SQLite.
"""

from datetime import datetime

import pytest

from blich_cms.core.database.repositories import AssetRepository, BlogPostRepository, StudioRepository
from blich_cms.core.errors import ConflictError, NotFoundError
from blich_cms.core.models.io.assets import AssetCreate, AssetLinks, AssetUpdate
from blich_cms.core.models.io.blog_posts import BlogPostCreate, BlogPostUpdate
from blich_cms.core.models.io.studios import StudioWrite, TeamMember
from blich_cms.server.services.content import AssetService, BlogPostService, StudioService

pytestmark = pytest.mark.asyncio


@pytest.fixture
def asset_service(session):
    return AssetService(AssetRepository(session))


@pytest.fixture
def blog_service(session):
    return BlogPostService(BlogPostRepository(session))


@pytest.fixture
def studio_service(session):
    return StudioService(StudioRepository(session))


class TestAssetService:
    async def test_links_drop_empty_entries(self, asset_service, session):
        created = await asset_service.create_asset(
            AssetCreate(title="Game", slug="game", description="d", links=AssetLinks(itch="https://itch.io/g"))
        )

        stored = await AssetRepository(session).get_by_id(created.id)
        assert stored.links == {"itch": "https://itch.io/g"}
        assert stored.type == "game"

    async def test_duplicate_slug(self, asset_service):
        await asset_service.create_asset(AssetCreate(title="Game", slug="game", description="d"))

        with pytest.raises(ConflictError):
            await asset_service.create_asset(AssetCreate(title="Other", slug="game", description="d"))

    async def test_partial_update(self, asset_service):
        created = await asset_service.create_asset(
            AssetCreate(title="Game", slug="game", description="d", platforms=["PC"])
        )

        updated = await asset_service.update_asset(created.id, AssetUpdate(platforms=["PC", "Switch"]))

        assert updated.platforms == ["PC", "Switch"]
        assert updated.title == "Game"

    async def test_published_filter(self, asset_service):
        await asset_service.create_asset(AssetCreate(title="A", slug="a", description="d", published=True))
        await asset_service.create_asset(AssetCreate(title="B", slug="b", description="d"))

        assert [a.slug for a in await asset_service.list_assets()] == ["a"]
        assert len(await asset_service.list_assets(published_only=False)) == 2

    async def test_missing_asset(self, asset_service):
        with pytest.raises(NotFoundError, match="Asset not found"):
            await asset_service.get_asset(404)


class TestBlogPostService:
    async def test_page_clamping(self, blog_service):
        page = await blog_service.list_published(page=0, limit=500)

        assert page.meta.current_page == 1
        assert page.meta.per_page == 100
        assert page.meta.last_page == 1

    async def test_publish_on_update_keeps_existing_time(self, blog_service):
        published_at = datetime(2024, 5, 1, 12, 0)
        created = await blog_service.create_post(
            BlogPostCreate(title="T", slug="t", content="c", published_at=published_at)
        )

        updated = await blog_service.update_post(created.id, BlogPostUpdate(status="published"))

        assert updated.published_at.replace(tzinfo=None) == published_at

    async def test_get_published_post_hides_drafts(self, blog_service):
        await blog_service.create_post(BlogPostCreate(title="T", slug="t", content="c"))

        with pytest.raises(NotFoundError, match="Blog post not found"):
            await blog_service.get_published_post("t")


class TestStudioService:
    async def test_get_without_profile(self, studio_service):
        with pytest.raises(NotFoundError, match="Studio not found"):
            await studio_service.get_studio()

    async def test_upsert_keeps_single_profile(self, studio_service, session):
        write = StudioWrite(
            name="Blich",
            description="Studio",
            founded_year=2020,
            team_members=[TeamMember(name="Ada", role="Dev")],
        )
        first = await studio_service.upsert_studio(write)
        second = await studio_service.upsert_studio(write.model_copy(update={"name": "Blich Games"}))

        assert first.id == second.id
        assert (await studio_service.get_studio()).name == "Blich Games"
        assert len(await StudioRepository(session).list()) == 1
        assert second.team_members[0].bio is None
