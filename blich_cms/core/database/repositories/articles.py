"""
Article repository interface and implementation.

This module provides data access operations for articles, including the
filtered, sorted and paginated search behind ``GET /api/v1/cms/articles``.
Tag filtering goes through the ``article_tags`` lookup table, which this
repository keeps in sync with ``Article.tags`` on every write.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.articles import Article, ArticleTag
from .base import AsyncBaseRepository, QueryBuilder

SORTABLE_FIELDS = ("created_at", "updated_at", "title", "slug", "status")


class ArticleRepository(AsyncBaseRepository[Article]):
    """Repository for article data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Article)

    async def create(self, article: Article) -> Article:
        """Persist a new article together with its tag lookup rows.

        Args:
            article: Article SQLModel instance

        Returns:
            Persisted Article
        """
        self.session.add(article)
        # Tag rows reference the article, so the article row goes in first
        await self._flush()
        self._add_tag_rows(article.id, article.tags)
        await self._commit()
        await self.session.refresh(article)
        return article

    async def get_by_slug(self, slug: str) -> Optional[Article]:
        stmt = select(Article).where(Article.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, article: Article) -> Article:
        """Persist changes to an article and bring its tag lookup rows in line.

        Args:
            article: Article instance with updated fields

        Returns:
            Updated Article
        """
        self.session.add(article)
        wanted = list(dict.fromkeys(article.tags or []))
        for row in await self._tag_rows(article.id):
            if row.tag in wanted:
                wanted.remove(row.tag)
            else:
                await self.session.delete(row)
        self._add_tag_rows(article.id, wanted)
        await self._commit()
        await self.session.refresh(article)
        return article

    async def delete(self, article_id: str | int) -> bool:
        """Delete an article and its tag lookup rows.

        Args:
            article_id: Article ID

        Returns:
            True if deleted, False if not found
        """
        article = await self.get_by_id(article_id)
        if article is None:
            return False
        for row in await self._tag_rows(article.id):
            await self.session.delete(row)
        await self._flush()
        await self.session.delete(article)
        await self._commit()
        return True

    async def search(
        self,
        *,
        status: Optional[str] = None,
        author_id: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        search: Optional[str] = None,
        sort_field: str = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[List[Article], int]:
        """Filter, sort and paginate articles.

        Args:
            status: Exact status match
            author_id: Exact author match
            tags: Match articles carrying any of these tags
            search: Case-insensitive substring matched against title, content and perex
            sort_field: Entity attribute to sort by (one of ``SORTABLE_FIELDS``)
            descending: Sort direction
            limit: Page size
            offset: Rows to skip

        Returns:
            Tuple of (page of articles, total number of matching articles)
        """
        if sort_field not in SORTABLE_FIELDS:
            raise ValueError(f"Unsupported sort field: {sort_field}")

        stmt = select(Article)
        stmt = QueryBuilder.apply_filters(stmt, Article, {"status": status, "author_id": author_id})

        if tags:
            tagged = select(ArticleTag.article_id).where(ArticleTag.tag.in_(list(tags)))
            stmt = stmt.where(Article.id.in_(tagged))

        if search:
            stmt = stmt.where(
                or_(
                    Article.title.icontains(search, autoescape=True),
                    Article.content.icontains(search, autoescape=True),
                    Article.perex.icontains(search, autoescape=True),
                )
            )

        total = await self.count(stmt)

        column = getattr(Article, sort_field)
        stmt = stmt.order_by(column.desc() if descending else column.asc(), Article.id)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Article]:
        """List articles newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Optional ``status``, ``author_id``, ``tags`` and ``search`` filters

        Returns:
            List of Article instances
        """
        filters = filters or {}
        articles, _ = await self.search(
            status=filters.get("status"),
            author_id=filters.get("author_id"),
            tags=filters.get("tags"),
            search=filters.get("search"),
            limit=limit,
            offset=offset,
        )
        return articles

    def _add_tag_rows(self, article_id: str, tags: Sequence[str]) -> None:
        for tag in dict.fromkeys(tags or []):
            self.session.add(ArticleTag(article_id=article_id, tag=tag))

    async def _tag_rows(self, article_id: str) -> List[ArticleTag]:
        result = await self.session.execute(select(ArticleTag).where(ArticleTag.article_id == article_id))
        return list(result.scalars().all())
