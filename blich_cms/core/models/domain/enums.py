"""Domain enums for CMS content models."""

from __future__ import annotations

from enum import Enum


class ArticleStatus(str, Enum):
    """Editorial state of an article."""

    draft = "draft"
    published = "published"
    archived = "archived"


class AssetType(str, Enum):
    """Kind of studio asset showcased on the games page."""

    animation = "animation"
    game = "game"
    tool = "tool"
    tabletop = "tabletop"
    article = "article"
    other = "other"


class AssetStatus(str, Enum):
    """Development stage of an asset."""

    in_development = "in-development"
    demo = "demo"
    early_access = "early-access"
    released = "released"


class BlogPostStatus(str, Enum):
    """Editorial state of a blog post. Only ``published`` posts are public."""

    draft = "draft"
    published = "published"


class SortOrder(str, Enum):
    """Sort direction for list queries."""

    asc = "asc"
    desc = "desc"
