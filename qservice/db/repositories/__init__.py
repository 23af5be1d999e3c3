"""
Relational implementations of the domain repository contracts.
"""

from .categories import SqlCategoryRepository
from .posts import SqlPostRepository

__all__ = ["SqlCategoryRepository", "SqlPostRepository"]
