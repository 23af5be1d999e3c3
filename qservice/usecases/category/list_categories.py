from typing import List, Optional

from pydantic import UUID4, Field, StrictBool

from qservice.domain import Category, CategoryFilter, CategoryRepository, FindAllCategoriesInput
from qservice.errors import BadRequestError, EntityPrefix, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput


class ListCategoriesFilter(UseCaseInput):
    path: Optional[List[UUID4]] = None
    ids: Optional[List[UUID4]] = None
    is_root: Optional[StrictBool] = Field(default=None, alias="isRoot")


class ListCategoriesInput(UseCaseInput):
    filter: Optional[ListCategoriesFilter] = None
    query: Optional[str] = None


class ListCategoriesUseCase(BaseUseCase[ListCategoriesInput, List[Category]]):
    """List categories by ids, root flag, path (children of its last id) or name substring."""

    input_model = ListCategoriesInput
    input_prefix = UseCaseInputPrefix.LIST_CATEGORIES.value

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def execute(self, data: ListCategoriesInput) -> List[Category]:
        criteria = FindAllCategoriesInput(query=data.query)
        if data.filter is not None:
            criteria.filter = CategoryFilter(
                path=[str(i) for i in data.filter.path or []],
                ids=[str(i) for i in data.filter.ids or []],
                is_root=bool(data.filter.is_root),
            )

        path = criteria.filter.path if criteria.filter else []
        if path and not self.category_repository.validate_category_path(path):
            raise BadRequestError(
                f"Invalid category path: {' > '.join(path)}",
                entity=EntityPrefix.CATEGORY.value,
            )

        return self.category_repository.find_all(criteria)
