import logging

from pydantic import UUID4

from qservice.domain import Post, PostRepository
from qservice.errors import EntityPrefix, NotFoundError, UseCaseInputPrefix
from qservice.usecases.base import BaseUseCase, UseCaseInput

logger = logging.getLogger(__name__)


class DeletePostInput(UseCaseInput):
    id: UUID4


class DeletePostUseCase(BaseUseCase[DeletePostInput, Post]):
    input_model = DeletePostInput
    input_prefix = UseCaseInputPrefix.DELETE_POST.value

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def execute(self, data: DeletePostInput) -> Post:
        post_id = str(data.id)
        found = self.post_repository.find_one(post_id)
        if not found:
            raise NotFoundError("Post not found", entity=EntityPrefix.POST.value)
        self.post_repository.delete(post_id)
        logger.info("post_deleted: id=%s", post_id)
        return found
