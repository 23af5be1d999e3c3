"""
Wire request -> use case input mapping.

Absent request fields are left out of the input dict so that validation
reports them as missing rather than as having the wrong type.
"""
from typing import Any, Dict


def _pick(request: Any, *keys: str) -> Dict[str, Any]:
    if not isinstance(request, dict):
        return {}
    return {k: request[k] for k in keys if request.get(k) is not None}


class RequestMapper:
    @staticmethod
    def to_create_category_input(request: Any) -> Dict[str, Any]:
        data = _pick(request, "name", "parentId")
        data.setdefault("parentId", None)
        return data

    @staticmethod
    def to_update_category_input(request: Any) -> Dict[str, Any]:
        return _pick(request, "id", "name")

    @staticmethod
    def to_delete_category_input(request: Any) -> Dict[str, Any]:
        return _pick(request, "id")

    @staticmethod
    def to_delete_categories_input(request: Any) -> Dict[str, Any]:
        return _pick(request, "ids")

    @staticmethod
    def to_list_categories_input(request: Any) -> Dict[str, Any]:
        data = _pick(request, "query")
        filter_ = request.get("filter") if isinstance(request, dict) else None
        if filter_:
            data["filter"] = filter_
        return data
