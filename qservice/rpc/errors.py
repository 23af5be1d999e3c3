"""
Exception -> gRPC error payload mapping.

Every RPC answers with either ``data`` or ``error``; this module produces
the ``error`` half. Exceptions outside the error taxonomy are logged and
reported as an unexpected system error.
"""
import logging
from typing import Any, Dict

from qservice.errors import CommonSystemCode, HTTPError, InternalServerError, ValidationError

logger = logging.getLogger(__name__)


class GrpcErrorMapper:
    @staticmethod
    def to_grpc_error(exc: Exception) -> Dict[str, Any]:
        if isinstance(exc, ValidationError):
            return {
                "httpStatusCode": exc.status_code,
                "code": exc.code,
                "message": exc.message,
                "details": [
                    {
                        "code": d.code,
                        "message": d.message,
                        "field": d.field,
                        "codeParams": [str(p) for p in d.code_params],
                    }
                    for d in exc.details
                ],
            }

        if isinstance(exc, HTTPError):
            return {
                "httpStatusCode": exc.status_code,
                "code": exc.code,
                "message": exc.message,
                "details": [],
            }

        logger.error("rpc_unexpected_error: %s", exc, exc_info=exc)
        system_error = InternalServerError(str(exc), CommonSystemCode.UNEXPECTED)
        return {
            "httpStatusCode": system_error.status_code,
            "code": system_error.code,
            "message": system_error.message,
            "details": [],
        }
