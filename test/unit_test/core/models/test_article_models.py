"""
Unit tests for the article I/O models.
"""

import pytest
from pydantic import ValidationError

from blich_cms.core.models.domain.enums import ArticleStatus
from blich_cms.core.models.io.articles import ArticleCreate, ArticleRead, ArticleUpdate
from blich_cms.core.models.io.common import is_valid_slug

VALID = {"title": "T", "slug": "t", "perex": "p", "content": "c", "authorId": "a"}


def messages(exc_info) -> list:
    return [error["msg"] for error in exc_info.value.errors()]


class TestSlug:
    @pytest.mark.parametrize("slug", ["a", "hello-world", "v2-release-99"])
    def test_valid(self, slug):
        assert is_valid_slug(slug)

    @pytest.mark.parametrize("slug", ["", "Hello", "double--dash", "-lead", "trail-", "with space", "under_score"])
    def test_invalid(self, slug):
        assert not is_valid_slug(slug)


class TestArticleCreate:
    def test_defaults(self):
        article = ArticleCreate.model_validate(VALID)

        assert article.status == ArticleStatus.draft
        assert article.tags == []
        assert article.author_id == "a"

    def test_title_length(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleCreate.model_validate({**VALID, "title": "x" * 201})

        assert messages(exc_info) == ["Title must be less than 200 characters"]

    def test_lengths_up_to_column_sizes_are_accepted(self):
        article = ArticleCreate.model_validate(
            {**VALID, "title": "x" * 200, "slug": "s" * 200, "authorId": "a" * 64, "tags": ["t" * 64]}
        )

        assert len(article.slug) == 200
        assert len(article.author_id) == 64
        assert article.tags == ["t" * 64]

    def test_lengths_over_column_sizes(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleCreate.model_validate({**VALID, "slug": "s" * 201, "authorId": "a" * 65, "tags": ["ok", "t" * 65]})

        assert messages(exc_info) == [
            "Slug must be less than 200 characters",
            "Author ID must be less than 64 characters",
            "Tag must be less than 64 characters",
        ]

    def test_blank_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleCreate.model_validate({**VALID, "perex": "   ", "authorId": ""})

        assert messages(exc_info) == ["Perex is required", "Author ID is required"]

    def test_status(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleCreate.model_validate({**VALID, "status": "live"})

        assert messages(exc_info) == ["Status must be one of: draft, published, archived"]

    def test_tags_are_trimmed(self):
        article = ArticleCreate.model_validate({**VALID, "tags": [" a ", "", "b"]})

        assert article.tags == ["a", "b"]


class TestArticleUpdate:
    def test_only_set_fields_are_dumped(self):
        update = ArticleUpdate.model_validate({"title": "New"})

        assert update.model_dump(exclude_unset=True) == {"title": "New"}

    def test_fields_are_checked_when_present(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleUpdate.model_validate({"slug": "Not Valid"})

        assert messages(exc_info) == ["Slug must contain only lowercase letters, numbers and hyphens"]


class TestArticleRead:
    def test_serializes_underscore_id_and_camel_case(self):
        article = ArticleRead(
            id="65a1b2c3d4e5f6a7b8c9d0e1",
            title="T",
            slug="t",
            perex="p",
            content="c",
            author_id="a",
            status=ArticleStatus.published,
            created_at=1,
            updated_at=2,
        )

        data = article.model_dump(mode="json", by_alias=True)

        assert data["_id"] == "65a1b2c3d4e5f6a7b8c9d0e1"
        assert data["authorId"] == "a"
        assert data["createdAt"] == 1
        assert data["status"] == "published"
