"""
Error code constants and the code builder.

Codes have the shape ``SERVICE-TYPE-NUMBER[-ENTITY]``, e.g.
``QS-BIZ-001-CATEGORY`` for a missing category. Validation details that
carry parameters get a ``-{n}P`` suffix (``QS-VAL-002-CATEGORY-1P``).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

SERVICE_PREFIX = "QS"


class EntityPrefix(str, Enum):
    """Domain types that can appear at the end of an error code."""
    CATEGORY = "CATEGORY"
    POST = "POST"


class UseCaseInputPrefix(str, Enum):
    """Entity part used for input validation failures of each use case."""
    CREATE_CATEGORY = "CREATE_CATEGORY"
    UPDATE_CATEGORY = "UPDATE_CATEGORY"
    DELETE_CATEGORY = "DELETE_CATEGORY"
    DELETE_CATEGORIES = "DELETE_CATEGORIES"
    LIST_CATEGORIES = "LIST_CATEGORIES"
    CREATE_POST = "CREATE_POST"
    GET_POST = "GET_POST"
    LIST_POSTS_BY_AUTHOR = "LIST_POSTS_BY_AUTHOR"
    UPDATE_POST = "UPDATE_POST"
    DELETE_POST = "DELETE_POST"


class ErrorType(str, Enum):
    VALIDATION = "VAL"
    BUSINESS = "BIZ"
    SYSTEM = "SYS"


class CommonValidationCode(str, Enum):
    REQUIRED = "001"
    MIN_LENGTH = "002"
    MAX_LENGTH = "003"
    PATTERN_MISMATCH = "004"
    INVALID_FORMAT = "005"
    INVALID_TYPE = "006"
    INVALID_RANGE = "007"
    INVALID_VALUE = "008"
    MIN_ITEMS = "009"
    MAX_ITEMS = "010"
    UNIQUE_ITEMS = "011"
    INVALID_ITEM = "012"
    REQUIRED_FIELDS = "013"
    INVALID_FIELD = "014"
    VALUE_MUST_GREATER_THAN = "015"
    VALUE_MUST_LESS_THAN = "016"
    VALUE_MUST_BE_GREATER_THAN_OR_EQUAL_TO = "017"
    VALUE_MUST_BE_LESS_THAN_OR_EQUAL_TO = "018"


class CommonBusinessCode(str, Enum):
    NOT_FOUND = "001"
    ALREADY_EXISTS = "002"
    INVALID_STATE = "003"
    INVALID_OPERATION = "004"
    INSUFFICIENT_PERMISSIONS = "005"


class CommonSystemCode(str, Enum):
    DATABASE = "001"
    NETWORK = "002"
    EXTERNAL_SERVICE = "003"
    CONFIGURATION = "004"
    UNEXPECTED = "005"


def _value(code) -> str:
    return code.value if isinstance(code, Enum) else str(code)


class ErrorCodeBuilder:
    """Format error codes for one service prefix."""

    def __init__(self, service_prefix: str):
        self.service_prefix = service_prefix

    def _build(self, entity: Optional[str], error_type: ErrorType, code) -> str:
        base = f"{self.service_prefix}-{error_type.value}-{_value(code)}"
        return f"{base}-{_value(entity)}" if entity else base

    def validation(self, code, entity=None) -> str:
        return self._build(entity, ErrorType.VALIDATION, code)

    def business(self, code, entity=None) -> str:
        return self._build(entity, ErrorType.BUSINESS, code)

    def system(self, code) -> str:
        return self._build(None, ErrorType.SYSTEM, code)


error_codes = ErrorCodeBuilder(SERVICE_PREFIX)
