"""
Article service.

Business rules for the article API: input validation with user-facing
messages, ObjectId-format identifier checks, pagination normalization and
translation of storage failures into domain errors. Routes stay thin and
only map the results to HTTP.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blich_cms.core.database.base import epoch_millis
from blich_cms.core.database.entities.articles import Article
from blich_cms.core.database.repositories.articles import ArticleRepository
from blich_cms.core.errors import (
    CmsError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from blich_cms.core.logging_config import get_logger
from blich_cms.core.models.domain.enums import SortOrder
from blich_cms.core.models.io.articles import (
    FIELD_LABELS,
    ArticleCreate,
    ArticleFilters,
    ArticleRead,
    ArticleUpdate,
    PaginatedArticles,
    PaginationMeta,
    PaginationQuery,
)

logger = get_logger(__name__)

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Keeps the row offset inside a 64-bit integer
MAX_PAGE = 100_000

# Public sort keys mapped to entity attributes
SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "title": "title",
    "slug": "slug",
    "status": "status",
}

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_valid_object_id(value: Any) -> bool:
    """Check that ``value`` is a 24-character hexadecimal identifier."""
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value))


def format_validation_errors(exc: PydanticValidationError) -> List[str]:
    """Turn a pydantic error into one user-facing message per problem."""
    messages = []
    for error in exc.errors():
        field = str(error["loc"][-1]) if error["loc"] else ""
        if error["type"] == "missing":
            messages.append(f"{FIELD_LABELS.get(field, field)} is required")
        else:
            messages.append(error["msg"])
    return messages


def _validate(model: Type[ModelT], data: Union[ModelT, Dict[str, Any], None]) -> ModelT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        first = e.errors()[0]["loc"] if e.errors() else ()
        raise ValidationError(
            f"Validation failed: {', '.join(format_validation_errors(e))}",
            field=str(first[-1]) if first else None,
        ) from e


class ArticleService:
    """CRUD and search operations for articles."""

    def __init__(self, repository: ArticleRepository):
        self.repository = repository

    async def create_article(self, data: Union[ArticleCreate, Dict[str, Any]]) -> Dict[str, str]:
        """
        Validate and store a new article.

        Args:
            data: Raw request body or an already validated ``ArticleCreate``

        Returns:
            ``{"id": "<24-hex id>"}`` of the new article

        Raises:
            ValidationError: Input is invalid
            ConflictError: Another article already uses the slug
            DatabaseError: The article could not be stored
        """
        try:
            payload = _validate(ArticleCreate, data)
            now = epoch_millis()
            article = Article(**payload.model_dump(mode="json"), created_at=now, updated_at=now)
            created = await self.repository.create(article)
            logger.info(f"Article created: {created.id}")
            return {"id": created.id}
        except ValidationError as e:
            logger.error(f"Article creation validation error: {e.message}")
            raise
        except IntegrityError as e:
            raise ConflictError("Article with this slug already exists") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to create article: {e}", exc_info=True)
            raise DatabaseError("Failed to create article") from e

    async def get_articles(
        self,
        pagination: Optional[PaginationQuery] = None,
        filters: Optional[ArticleFilters] = None,
    ) -> PaginatedArticles:
        """
        Get one page of articles.

        ``page`` is clamped to 1..100000 and ``limit`` is clamped to 1..100 (default 10).
        Without an explicit sort field articles come newest first.

        Args:
            pagination: Page, limit, sort field and order
            filters: Status, author, tags (any-of) and free-text search

        Returns:
            Articles on the page plus pagination metadata
        """
        pagination = pagination or PaginationQuery()
        filters = filters or ArticleFilters()

        page = min(MAX_PAGE, max(1, pagination.page if pagination.page is not None else 1))
        limit = min(MAX_PAGE_SIZE, max(1, pagination.limit if pagination.limit is not None else DEFAULT_PAGE_SIZE))

        if pagination.sort:
            if pagination.sort not in SORT_FIELDS:
                raise ValidationError(
                    f"Invalid sort field: {pagination.sort}. Allowed: {', '.join(SORT_FIELDS)}", field="sort"
                )
            sort_field = SORT_FIELDS[pagination.sort]
            descending = pagination.order == SortOrder.desc
        else:
            sort_field = "created_at"
            descending = pagination.order != SortOrder.asc

        try:
            articles, total = await self.repository.search(
                status=filters.status.value if filters.status else None,
                author_id=filters.author_id,
                tags=filters.tags,
                search=filters.search,
                sort_field=sort_field,
                descending=descending,
                limit=limit,
                offset=(page - 1) * limit,
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch articles: {e}", exc_info=True)
            raise DatabaseError("Failed to fetch articles") from e

        total_pages = math.ceil(total / limit)
        logger.info(f"Fetched {len(articles)} articles (page {page}/{total_pages})")

        return PaginatedArticles(
            data=[ArticleRead.model_validate(article) for article in articles],
            pagination=PaginationMeta(
                page=page,
                limit=limit,
                total=total,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    async def get_article_by_id(self, article_id: str) -> ArticleRead:
        """
        Get a single article.

        Raises:
            ValidationError: ``article_id`` is not a 24-hex identifier
            NotFoundError: No such article
        """
        self._check_id(article_id)
        try:
            article = await self.repository.get_by_id(article_id.lower())
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch article: {article_id}", exc_info=True)
            raise DatabaseError("Failed to fetch article") from e

        if article is None:
            logger.error(f"Article not found: {article_id}")
            raise NotFoundError("Article")
        return ArticleRead.model_validate(article)

    async def update_article(self, article_id: str, data: Union[ArticleUpdate, Dict[str, Any]]) -> ArticleRead:
        """
        Merge the provided fields into an article and bump ``updatedAt``.

        Raises:
            ValidationError: Bad identifier, invalid fields or an empty update
            NotFoundError: No such article
            ConflictError: The new slug is already taken
        """
        self._check_id(article_id)
        try:
            payload = _validate(ArticleUpdate, data)
            changes = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
            if not changes:
                logger.error(f"No update data provided for article {article_id}")
                raise ValidationError("No update data provided")

            article = await self.repository.get_by_id(article_id.lower())
            if article is None:
                logger.error(f"Article not found for update: {article_id}")
                raise NotFoundError("Article")

            for key, value in changes.items():
                setattr(article, key, value)
            article.updated_at = max(epoch_millis(), article.updated_at + 1)

            updated = await self.repository.update(article)
            logger.info(f"Article updated: {article_id}")
            return ArticleRead.model_validate(updated)
        except CmsError:
            raise
        except IntegrityError as e:
            raise ConflictError("Article with this slug already exists") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to update article: {article_id}", exc_info=True)
            raise DatabaseError("Failed to update article") from e

    async def delete_article(self, article_id: str) -> None:
        """
        Delete an article.

        Raises:
            ValidationError: ``article_id`` is not a 24-hex identifier
            NotFoundError: No such article
        """
        self._check_id(article_id)
        try:
            deleted = await self.repository.delete(article_id.lower())
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete article: {article_id}", exc_info=True)
            raise DatabaseError("Failed to delete article") from e

        if not deleted:
            logger.error(f"Article not found for deletion: {article_id}")
            raise NotFoundError("Article")
        logger.info(f"Article deleted: {article_id}")

    @staticmethod
    def _check_id(article_id: str) -> None:
        if not is_valid_object_id(article_id):
            logger.error(f"Invalid article ID format: {article_id}")
            raise ValidationError("Invalid article ID format", field="id")
