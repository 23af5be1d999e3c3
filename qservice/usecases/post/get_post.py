from pydantic import UUID4

from qservice.domain import Post, PostRepository
from qservice.errors import EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput


class GetPostInput(UseCaseInput):
    id: UUID4


class GetPostUseCase(BaseUseCase[GetPostInput, Post]):
    input_model = GetPostInput
    input_prefix = UseCaseInputPrefix.GET_POST.value

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def execute(self, data: GetPostInput) -> Post:
        post = self.post_repository.find_one(str(data.id))
        if not post:
            raise NotFoundError("Post not found", entity=EntityPrefix.POST.value)
        return post
