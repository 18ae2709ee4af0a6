"""
Repository layer.

One repository per content table, all sharing ``AsyncBaseRepository`` for
plain CRUD. Repositories commit their own writes; services never touch the
session directly.
"""

from .admin_users import AdminUserRepository
from .articles import SORTABLE_FIELDS, ArticleRepository
from .assets import AssetRepository
from .base import AsyncBaseRepository, QueryBuilder
from .blog_posts import BlogPostRepository
from .studios import StudioRepository

__all__ = [
    "AdminUserRepository",
    "ArticleRepository",
    "AssetRepository",
    "AsyncBaseRepository",
    "BlogPostRepository",
    "QueryBuilder",
    "SORTABLE_FIELDS",
    "StudioRepository",
]
