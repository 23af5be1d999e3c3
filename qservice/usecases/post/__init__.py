from .create_post import CreatePostInput, CreatePostUseCase
from .delete_post import DeletePostInput, DeletePostUseCase
from .get_post import GetPostInput, GetPostUseCase
from .list_posts_by_author import ListPostsByAuthorInput, ListPostsByAuthorUseCase
from .update_post import UpdatePostInput, UpdatePostUseCase

__all__ = [
    "CreatePostInput",
    "CreatePostUseCase",
    "DeletePostInput",
    "DeletePostUseCase",
    "GetPostInput",
    "GetPostUseCase",
    "ListPostsByAuthorInput",
    "ListPostsByAuthorUseCase",
    "UpdatePostInput",
    "UpdatePostUseCase",
]
