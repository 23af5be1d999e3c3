import logging
from typing import Annotated

from pydantic import UUID4, Field, StringConstraints

from qservice.domain import Post, PostRepository
from qservice.errors import UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

logger = logging.getLogger(__name__)

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class CreatePostInput(UseCaseInput):
    title: NonEmptyStr
    content: NonEmptyStr
    author_id: UUID4 = Field(alias="authorId")


class CreatePostUseCase(BaseUseCase[CreatePostInput, Post]):
    input_model = CreatePostInput
    input_prefix = UseCaseInputPrefix.CREATE_POST.value

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def execute(self, data: CreatePostInput) -> Post:
        post = Post(title=data.title, content=data.content, author_id=str(data.author_id))
        created = self.post_repository.create(post)
        logger.info("post_created: id=%s author_id=%s", created.id, created.author_id)
        return created
