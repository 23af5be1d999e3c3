"""
SQLAlchemy ORM rows. Domain models live in `qservice.domain.models`.
"""

from .base import Base, now_utc
from .categories import Category
from .posts import Post

__all__ = ["Base", "now_utc", "Category", "Post"]
