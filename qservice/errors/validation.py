"""
Field-level validation helpers.

Domain models report `Violation` objects from their own ``validate()``;
use case inputs are pydantic models whose errors are translated here. Both
end up as `ErrorDetail` lists inside a validation error.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field as dc_field
from datetime import datetime
from typing import Any, Iterable, List, Optional

import pydantic

from .base import ErrorDetail
from .codes import CommonValidationCode, error_codes
from .types import InputValidationError, ModelValidationError


@dataclass
class Violation:
    path: str
    code: CommonValidationCode
    message: str
    params: List[Any] = dc_field(default_factory=list)


def is_uuid4(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return parsed.version == 4 and str(parsed) == value.lower()


def is_iso_datetime(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def check_non_empty_string(name: str, value: Any) -> Optional[Violation]:
    if not isinstance(value, str):
        return Violation(name, CommonValidationCode.INVALID_TYPE, "must be a string")
    if not value:
        return Violation(name, CommonValidationCode.REQUIRED, "should not be empty")
    return None


def check_uuid4(name: str, value: Any, optional: bool = False) -> Optional[Violation]:
    if value is None and optional:
        return None
    if not is_uuid4(value):
        return Violation(name, CommonValidationCode.INVALID_FORMAT, "must be a UUID v4")
    return None


def check_iso_datetime(name: str, value: Any) -> Optional[Violation]:
    if not is_iso_datetime(value):
        return Violation(name, CommonValidationCode.INVALID_FORMAT, "must be a valid ISO 8601 date string")
    return None


def _detail_code(code: CommonValidationCode, entity: str, params: List[Any]) -> str:
    base = error_codes.validation(code, entity)
    return f"{base}-{len(params)}P" if params else base


def to_details(violations: Iterable[Violation], entity: str) -> List[ErrorDetail]:
    return [
        ErrorDetail(
            field=v.path,
            code=_detail_code(v.code, entity, v.params),
            message=f"Field '{v.path}' {v.message}",
            code_params=list(v.params),
        )
        for v in violations
    ]


def model_validation_error(violations: List[Violation], entity: str, message: str = "Invalid model") -> ModelValidationError:
    return ModelValidationError(
        error_codes.validation(CommonValidationCode.INVALID_VALUE, entity),
        message,
        to_details(violations, entity),
    )


_TYPE_ERRORS = {
    "string_type", "bool_type", "bool_parsing", "list_type", "dict_type",
    "int_type", "int_parsing", "model_type", "model_attributes_type",
}
_FORMAT_ERRORS = {"uuid_parsing", "uuid_type", "uuid_version", "datetime_parsing", "datetime_from_date_parsing"}


def _violation_from_pydantic(error: dict) -> Violation:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "input"
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}
    msg = error.get("msg") or "Invalid value"
    text = msg[:1].lower() + msg[1:]

    if kind == "missing":
        return Violation(loc, CommonValidationCode.REQUIRED, "is required")
    if kind in ("string_too_short", "too_short"):
        minimum = ctx.get("min_length")
        if minimum in (None, 1):
            return Violation(loc, CommonValidationCode.REQUIRED, "should not be empty")
        code = CommonValidationCode.MIN_LENGTH if kind == "string_too_short" else CommonValidationCode.MIN_ITEMS
        return Violation(loc, code, text, [minimum])
    if kind in ("string_too_long", "too_long"):
        code = CommonValidationCode.MAX_LENGTH if kind == "string_too_long" else CommonValidationCode.MAX_ITEMS
        return Violation(loc, code, text, [ctx.get("max_length")])
    if kind in _TYPE_ERRORS:
        return Violation(loc, CommonValidationCode.INVALID_TYPE, text)
    if kind in _FORMAT_ERRORS:
        return Violation(loc, CommonValidationCode.INVALID_FORMAT, text)
    if kind == "extra_forbidden":
        return Violation(loc, CommonValidationCode.INVALID_FIELD, "is not allowed")
    return Violation(loc, CommonValidationCode.INVALID_VALUE, text)


def input_validation_error(exc: pydantic.ValidationError, entity: str, message: str = "Invalid input") -> InputValidationError:
    """Translate a pydantic error into an `InputValidationError` listing every field."""
    violations = [_violation_from_pydantic(e) for e in exc.errors()]
    return InputValidationError(
        error_codes.validation(CommonValidationCode.INVALID_VALUE, entity),
        message,
        to_details(violations, entity),
    )
