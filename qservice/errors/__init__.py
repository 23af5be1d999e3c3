"""
Error taxonomy: validation (400), business (4xx) and system (5xx) errors.
"""

from .base import BaseError, ErrorDetail
from .codes import (
    SERVICE_PREFIX,
    CommonBusinessCode,
    CommonSystemCode,
    CommonValidationCode,
    EntityPrefix,
    ErrorCodeBuilder,
    ErrorType,
    UseCaseInputPrefix,
    error_codes,
)
from .types import (
    AlreadyExistsError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    HTTPBusinessError,
    HTTPError,
    HTTPSystemError,
    InputValidationError,
    InternalServerError,
    ModelValidationError,
    NotFoundError,
    UnauthorizedError,
    UnknownError,
    UnprocessableEntityError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "ErrorDetail",
    "SERVICE_PREFIX",
    "CommonBusinessCode",
    "CommonSystemCode",
    "CommonValidationCode",
    "EntityPrefix",
    "ErrorCodeBuilder",
    "ErrorType",
    "UseCaseInputPrefix",
    "error_codes",
    "AlreadyExistsError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "HTTPBusinessError",
    "HTTPError",
    "HTTPSystemError",
    "InputValidationError",
    "InternalServerError",
    "ModelValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "UnknownError",
    "UnprocessableEntityError",
    "ValidationError",
]
