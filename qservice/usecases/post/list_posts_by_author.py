from typing import List

from pydantic import UUID4, Field

from qservice.domain import Post, PostRepository
from qservice.errors import UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput


class ListPostsByAuthorInput(UseCaseInput):
    author_id: UUID4 = Field(alias="authorId")


class ListPostsByAuthorUseCase(BaseUseCase[ListPostsByAuthorInput, List[Post]]):
    input_model = ListPostsByAuthorInput
    input_prefix = UseCaseInputPrefix.LIST_POSTS_BY_AUTHOR.value

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def execute(self, data: ListPostsByAuthorInput) -> List[Post]:
        return self.post_repository.find_by_author(str(data.author_id))
