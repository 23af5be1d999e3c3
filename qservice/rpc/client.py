"""
Thin client for the category service, speaking the JSON codec.
"""
from typing import Any, Dict

import grpc

from . import codec
from .handler import RPC_METHODS


class CategoryServiceClient:
    def __init__(self, channel: grpc.Channel, timeout: float = 10.0):
        self.timeout = timeout
        self._calls = {
            name: channel.unary_unary(
                codec.method_path(name),
                request_serializer=codec.serialize,
                response_deserializer=codec.deserialize,
            )
            for name in RPC_METHODS
        }

    def call(self, method: str, request: Dict[str, Any]) -> Dict[str, Any]:
        return self._calls[method](request, timeout=self.timeout)

    def create_category(self, name: str, parent_id: str = None) -> Dict[str, Any]:
        request = {"name": name}
        if parent_id is not None:
            request["parentId"] = parent_id
        return self.call("CreateCategory", request)

    def update_category(self, id: str, name: str) -> Dict[str, Any]:
        return self.call("UpdateCategory", {"id": id, "name": name})

    def delete_category(self, id: str) -> Dict[str, Any]:
        return self.call("DeleteCategory", {"id": id})

    def delete_categories(self, ids) -> Dict[str, Any]:
        return self.call("DeleteCategories", {"ids": list(ids)})

    def list_categories(self, filter: Dict[str, Any] = None, query: str = None) -> Dict[str, Any]:
        request: Dict[str, Any] = {}
        if filter is not None:
            request["filter"] = filter
        if query is not None:
            request["query"] = query
        return self.call("ListCategories", request)
