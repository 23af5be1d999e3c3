"""Domain layer: models and repository contracts."""

from .models import Category, Post
from .repositories import (
    CategoryFilter,
    CategoryRepository,
    FindAllCategoriesInput,
    PostRepository,
)

__all__ = [
    "Category",
    "Post",
    "CategoryFilter",
    "CategoryRepository",
    "FindAllCategoriesInput",
    "PostRepository",
]
