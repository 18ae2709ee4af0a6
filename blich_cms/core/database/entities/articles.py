"""
Article entity models.

This module contains the database entities for long-form articles served by
the ``/api/v1/cms/articles`` endpoints. Articles keep MongoDB-style 24-hex
identifiers and epoch-millisecond timestamps because the gateway and the public
site already consume that shape.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import JSON, BigInteger, Column, Text
from sqlmodel import Field

from ..base import Base, epoch_millis, new_object_id


class Article(Base, table=True):
    """Persistent article.

    Table: articles
    """

    __tablename__ = "articles"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    title: str = Field(max_length=200)
    slug: str = Field(max_length=200, unique=True, index=True)
    perex: str = Field(sa_column=Column(Text, nullable=False))
    content: str = Field(sa_column=Column(Text, nullable=False))
    author_id: str = Field(max_length=64, index=True)
    status: str = Field(default="draft", max_length=16, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: int = Field(default_factory=epoch_millis, sa_column=Column(BigInteger, nullable=False, index=True))
    updated_at: int = Field(default_factory=epoch_millis, sa_column=Column(BigInteger, nullable=False))

    def __repr__(self) -> str:
        return f"Article(id={self.id}, slug={self.slug}, status={self.status})"


class ArticleTag(Base, table=True):
    """Lookup row used to filter articles by tag.

    One row per (article, tag) pair, kept in sync with ``Article.tags`` by
    ``ArticleRepository``.

    Table: article_tags
    """

    __tablename__ = "article_tags"

    article_id: str = Field(foreign_key="articles.id", primary_key=True, max_length=24)
    tag: str = Field(primary_key=True, max_length=64, index=True)
