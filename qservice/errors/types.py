"""
Concrete error classes.

Business errors map to 4xx statuses, system errors to 5xx, and validation
errors always to 400 with per-field details.
"""
from __future__ import annotations

from typing import List, Optional

from .base import BaseError, ErrorDetail
from .codes import CommonBusinessCode, CommonSystemCode, error_codes


class HTTPError(BaseError):
    def __init__(self, message: str, code: str, status_code: int):
        super().__init__(code, message)
        self.status_code = status_code


class HTTPBusinessError(HTTPError):
    default_code = CommonBusinessCode.INVALID_OPERATION
    default_status = 400

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        entity: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        error_code = error_codes.business(code or self.default_code, entity)
        super().__init__(message or "", error_code, status_code or self.default_status)


class HTTPSystemError(HTTPError):
    def __init__(self, message: Optional[str] = None, code: Optional[str] = None, status_code: int = 500):
        error_code = error_codes.system(code or CommonSystemCode.UNEXPECTED)
        super().__init__(message or "", error_code, status_code)


# Business errors

class BadRequestError(HTTPBusinessError):
    default_code = CommonBusinessCode.INVALID_OPERATION
    default_status = 400


class UnauthorizedError(HTTPBusinessError):
    default_code = CommonBusinessCode.INSUFFICIENT_PERMISSIONS
    default_status = 401


class ForbiddenError(HTTPBusinessError):
    default_code = CommonBusinessCode.INSUFFICIENT_PERMISSIONS
    default_status = 403


class NotFoundError(HTTPBusinessError):
    default_code = CommonBusinessCode.NOT_FOUND
    default_status = 404


class ConflictError(HTTPBusinessError):
    default_code = CommonBusinessCode.INVALID_STATE
    default_status = 409


class AlreadyExistsError(HTTPBusinessError):
    default_code = CommonBusinessCode.ALREADY_EXISTS
    default_status = 409


class UnprocessableEntityError(HTTPBusinessError):
    default_code = CommonBusinessCode.INVALID_OPERATION
    default_status = 422


# System errors

class InternalServerError(HTTPSystemError):
    pass


class UnknownError(HTTPSystemError):
    pass


# Validation errors

class ValidationError(BaseError):
    status_code = 400

    def __init__(
        self,
        code: str = "VALIDATION_ERROR",
        message: str = "Validation failed",
        details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(code, message, details)


class InputValidationError(ValidationError):
    """Client supplied data for a use case is invalid."""

    def __init__(
        self,
        code: str = "INPUT_VALIDATION_ERROR",
        message: str = "Invalid input",
        details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(code, message, details)


class ModelValidationError(ValidationError):
    """A domain model violates its own field constraints."""

    def __init__(
        self,
        code: str = "MODEL_VALIDATION_ERROR",
        message: str = "Invalid model",
        details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(code, message, details)
