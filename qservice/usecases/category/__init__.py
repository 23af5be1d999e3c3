from .create_category import CreateCategoryInput, CreateCategoryUseCase
from .delete_categories import DeleteCategoriesInput, DeleteCategoriesUseCase
from .delete_category import DeleteCategoryInput, DeleteCategoryUseCase
from .list_categories import ListCategoriesFilter, ListCategoriesInput, ListCategoriesUseCase
from .update_category import UpdateCategoryInput, UpdateCategoryUseCase

__all__ = [
    "CreateCategoryInput",
    "CreateCategoryUseCase",
    "DeleteCategoriesInput",
    "DeleteCategoriesUseCase",
    "DeleteCategoryInput",
    "DeleteCategoryUseCase",
    "ListCategoriesFilter",
    "ListCategoriesInput",
    "ListCategoriesUseCase",
    "UpdateCategoryInput",
    "UpdateCategoryUseCase",
]
