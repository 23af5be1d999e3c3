"""
API dependency helpers.

Routes resolve repositories from the container stored on ``app.state``.
"""
from fastapi import Depends
from starlette.requests import Request

from qservice.container import ServiceContainer
from qservice.domain import PostRepository


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_post_repository(container: ServiceContainer = Depends(get_container)) -> PostRepository:
    return container.post_repository
