"""
Database entity models.

This package contains all database entity models, one module per content
table:

- articles: Articles and their tag lookup rows
- assets: Showcased games, animations and tools
- blog_posts: Blog posts
- studios: Studio profile
- admin_users: Admin accounts for the management console
"""

from . import admin_users, articles, assets, blog_posts, studios

__all__ = [
    "admin_users",
    "articles",
    "assets",
    "blog_posts",
    "studios",
]
