"""Domain models."""

from .base import DomainModel, now_iso, to_iso
from .category import Category
from .post import Post

__all__ = ["DomainModel", "now_iso", "to_iso", "Category", "Post"]
