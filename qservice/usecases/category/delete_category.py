import logging

from pydantic import UUID4

from qservice.domain import Category, CategoryRepository
from qservice.errors import BadRequestError, EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

logger = logging.getLogger(__name__)


class DeleteCategoryInput(UseCaseInput):
    id: UUID4


class DeleteCategoryUseCase(BaseUseCase[DeleteCategoryInput, Category]):
    """Delete a leaf category and return it as it was before deletion."""

    input_model = DeleteCategoryInput
    input_prefix = UseCaseInputPrefix.DELETE_CATEGORY.value

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def execute(self, data: DeleteCategoryInput) -> Category:
        category_id = str(data.id)

        found = self.category_repository.find_one(category_id)
        if not found:
            raise NotFoundError(
                f"Category with id '{category_id}' not found",
                entity=EntityPrefix.CATEGORY.value,
            )

        if self.category_repository.has_children([category_id]):
            raise BadRequestError(
                f"Category with id '{category_id}' has children",
                entity=EntityPrefix.CATEGORY.value,
            )

        self.category_repository.delete(category_id)
        logger.info("category_deleted: id=%s", category_id)
        return found
