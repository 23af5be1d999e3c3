from typing import Annotated

from pydantic import UUID4, StringConstraints

from qservice.domain import Category, CategoryRepository
from qservice.errors import EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput


class UpdateCategoryInput(UseCaseInput):
    id: UUID4
    name: Annotated[str, StringConstraints(min_length=1)]


class UpdateCategoryUseCase(BaseUseCase[UpdateCategoryInput, Category]):
    input_model = UpdateCategoryInput
    input_prefix = UseCaseInputPrefix.UPDATE_CATEGORY.value

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def execute(self, data: UpdateCategoryInput) -> Category:
        category_id = str(data.id)

        found = self.category_repository.find_one(category_id)
        if not found:
            raise NotFoundError(
                f"Category with id '{category_id}' not found",
                entity=EntityPrefix.CATEGORY.value,
            )

        # Domain-level validation of the new name; the stored row is returned.
        found.update(name=data.name)

        return self.category_repository.update(category_id, {"name": data.name})
