from typing import Annotated, Optional

from pydantic import UUID4, StringConstraints, model_validator

from qservice.domain import Post, PostRepository
from qservice.errors import EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class UpdatePostInput(UseCaseInput):
    id: UUID4
    title: Optional[NonEmptyStr] = None
    content: Optional[NonEmptyStr] = None

    @model_validator(mode="after")
    def _require_change(self):
        if self.title is None and self.content is None:
            raise ValueError("at least one of title, content is required")
        return self


class UpdatePostUseCase(BaseUseCase[UpdatePostInput, Post]):
    input_model = UpdatePostInput
    input_prefix = UseCaseInputPrefix.UPDATE_POST.value

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def execute(self, data: UpdatePostInput) -> Post:
        post_id = str(data.id)
        found = self.post_repository.find_one(post_id)
        if not found:
            raise NotFoundError("Post not found", entity=EntityPrefix.POST.value)

        found.update(title=data.title, content=data.content)

        changes = {}
        if data.title is not None:
            changes["title"] = data.title
        if data.content is not None:
            changes["content"] = data.content
        return self.post_repository.update(post_id, changes)
