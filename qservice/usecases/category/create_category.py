import logging
from typing import Annotated, Optional

from pydantic import UUID4, Field, StringConstraints

from qservice.domain import Category, CategoryRepository
from qservice.errors import AlreadyExistsError, EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

logger = logging.getLogger(__name__)

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class CreateCategoryInput(UseCaseInput):
    name: NonEmptyStr
    parent_id: Optional[UUID4] = Field(default=None, alias="parentId")


class CreateCategoryUseCase(BaseUseCase[CreateCategoryInput, Category]):
    input_model = CreateCategoryInput
    input_prefix = UseCaseInputPrefix.CREATE_CATEGORY.value

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def execute(self, data: CreateCategoryInput) -> Category:
        parent_id = str(data.parent_id) if data.parent_id else None

        if self.category_repository.find_one_by_name(data.name):
            raise AlreadyExistsError(
                f"Category with name '{data.name}' already exists",
                entity=EntityPrefix.CATEGORY.value,
            )

        if parent_id and not self.category_repository.find_one(parent_id):
            raise NotFoundError(
                f"Parent category with id '{parent_id}' not found",
                entity=EntityPrefix.CATEGORY.value,
            )

        category = Category(name=data.name, parent_id=parent_id)
        created = self.category_repository.create(category)
        logger.info("category_created: id=%s parent_id=%s", created.id, created.parent_id)
        return created
