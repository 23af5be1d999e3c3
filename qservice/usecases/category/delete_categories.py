"""
Bulk category deletion.

The batch is all-or-nothing: an unknown id or any id with children rejects
the whole request before anything is deleted.
"""
import logging
from typing import List

from pydantic import UUID4, Field

from qservice.domain import CategoryFilter, CategoryRepository, FindAllCategoriesInput
from qservice.errors import BadRequestError, EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

logger = logging.getLogger(__name__)


class DeleteCategoriesInput(UseCaseInput):
    ids: List[UUID4] = Field(min_length=1)


class DeleteCategoriesUseCase(BaseUseCase[DeleteCategoriesInput, bool]):
    input_model = DeleteCategoriesInput
    input_prefix = UseCaseInputPrefix.DELETE_CATEGORIES.value

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def execute(self, data: DeleteCategoriesInput) -> bool:
        ids = list(dict.fromkeys(str(i) for i in data.ids))

        found = self.category_repository.find_all(
            FindAllCategoriesInput(filter=CategoryFilter(ids=ids))
        )
        if len(found) != len(ids):
            found_ids = {c.id for c in found}
            missing = [i for i in ids if i not in found_ids]
            raise NotFoundError(
                f"Category with id {', '.join(missing)} not found",
                entity=EntityPrefix.CATEGORY.value,
            )

        if self.category_repository.has_children(ids):
            raise BadRequestError(
                "There are ids that have children, delete the children first",
                entity=EntityPrefix.CATEGORY.value,
            )

        self.category_repository.delete_many(ids)
        logger.info("categories_deleted: count=%d", len(ids))
        return True
