"""Domain enums shared by entities, repositories and I/O models."""

from __future__ import annotations

from .enums import ArticleStatus, AssetStatus, AssetType, BlogPostStatus, SortOrder

__all__ = [
    "ArticleStatus",
    "AssetStatus",
    "AssetType",
    "BlogPostStatus",
    "SortOrder",
]
