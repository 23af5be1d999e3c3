"""
Persistence contracts used by the use cases.

Implementations live in `qservice.db.repositories`; tests substitute mocks.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Category, Post


@dataclass
class CategoryFilter:
    path: List[str] = field(default_factory=list)
    ids: List[str] = field(default_factory=list)
    is_root: bool = False


@dataclass
class FindAllCategoriesInput:
    filter: Optional[CategoryFilter] = None
    query: Optional[str] = None


class CategoryRepository(ABC):
    @abstractmethod
    def create(self, category: Category) -> Category: ...

    @abstractmethod
    def find_all(self, criteria: FindAllCategoriesInput) -> List[Category]: ...

    @abstractmethod
    def find_one(self, id: str) -> Optional[Category]: ...

    @abstractmethod
    def find_one_by_name(self, name: str) -> Optional[Category]: ...

    @abstractmethod
    def update(self, id: str, changes: dict) -> Category:
        """Apply ``changes`` (``name`` and/or ``updatedAt``) and return the stored row."""

    @abstractmethod
    def delete(self, id: str) -> None: ...

    @abstractmethod
    def delete_many(self, ids: List[str]) -> None: ...

    @abstractmethod
    def validate_category_path(self, path: List[str]) -> bool:
        """True when ``path`` is a root-to-leaf chain of parent/child pairs."""

    @abstractmethod
    def has_children(self, ids: List[str]) -> bool:
        """True when any category has its parent in ``ids``."""


class PostRepository(ABC):
    @abstractmethod
    def create(self, post: Post) -> Post: ...

    @abstractmethod
    def find_one(self, id: str) -> Optional[Post]: ...

    @abstractmethod
    def find_by_author(self, author_id: str) -> List[Post]:
        """Posts by ``author_id``, newest first."""

    @abstractmethod
    def update(self, id: str, changes: dict) -> Post: ...

    @abstractmethod
    def delete(self, id: str) -> None: ...
