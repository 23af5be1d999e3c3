"""
Category service RPC handlers.

One method per RPC; each builds its use case from the container, runs it
and wraps the outcome as ``{"data": ...}`` or ``{"error": ...}``.
"""
import logging
from typing import Any, Callable, Dict

import grpc

from qservice.container import ServiceContainer
from qservice.usecases import (
    BaseUseCase,
    CreateCategoryUseCase,
    DeleteCategoriesUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)

from . import codec
from .errors import GrpcErrorMapper
from .mapper import RequestMapper

logger = logging.getLogger(__name__)


def _to_json(model) -> Dict[str, Any]:
    return model.to_json()


class CategoryServicer:
    def __init__(self, container: ServiceContainer):
        self.container = container

    def _run(
        self,
        use_case: BaseUseCase,
        payload: Dict[str, Any],
        present: Callable[[Any], Any],
    ) -> Dict[str, Any]:
        try:
            result = use_case.handle(payload)
        except Exception as exc:
            error = GrpcErrorMapper.to_grpc_error(exc)
            logger.debug("rpc_error: use_case=%s code=%s", type(use_case).__name__, error["code"])
            return {"error": error}
        return {"data": present(result)}

    def CreateCategory(self, request, context):
        return self._run(
            CreateCategoryUseCase(self.container.category_repository),
            RequestMapper.to_create_category_input(request),
            _to_json,
        )

    def UpdateCategory(self, request, context):
        return self._run(
            UpdateCategoryUseCase(self.container.category_repository),
            RequestMapper.to_update_category_input(request),
            _to_json,
        )

    def DeleteCategory(self, request, context):
        return self._run(
            DeleteCategoryUseCase(self.container.category_repository),
            RequestMapper.to_delete_category_input(request),
            _to_json,
        )

    def DeleteCategories(self, request, context):
        return self._run(
            DeleteCategoriesUseCase(self.container.category_repository),
            RequestMapper.to_delete_categories_input(request),
            lambda result: result,
        )

    def ListCategories(self, request, context):
        return self._run(
            ListCategoriesUseCase(self.container.category_repository),
            RequestMapper.to_list_categories_input(request),
            lambda categories: {"items": [c.to_json() for c in categories]},
        )


RPC_METHODS = (
    "CreateCategory",
    "UpdateCategory",
    "DeleteCategory",
    "DeleteCategories",
    "ListCategories",
)


def build_generic_handler(servicer: CategoryServicer) -> grpc.GenericRpcHandler:
    handlers = {
        name: grpc.unary_unary_rpc_method_handler(
            getattr(servicer, name),
            request_deserializer=codec.deserialize,
            response_serializer=codec.serialize,
        )
        for name in RPC_METHODS
    }
    return grpc.method_handlers_generic_handler(codec.SERVICE_NAME, handlers)
