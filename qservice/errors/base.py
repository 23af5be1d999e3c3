"""
Base error type shared by every layer.

Each error carries a machine-readable code, a message and optional
field-level details, rendered as ``{"error": {code, message, details}}``.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class ErrorDetail:
    code: str
    field: Optional[str] = None
    message: Optional[str] = None
    code_params: List[Any] = dataclasses.field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
            "codeParams": list(self.code_params),
        }


class BaseError(Exception):
    def __init__(self, code: str, message: str, details: Optional[List[ErrorDetail]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: List[ErrorDetail] = list(details or [])

    @property
    def response(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": [d.to_dict() for d in self.details],
            }
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
