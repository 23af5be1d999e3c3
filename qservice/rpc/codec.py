"""
JSON message codec for the gRPC transport.

Messages are plain dicts serialized as UTF-8 JSON, so handlers can be
registered as generic handlers without generated stubs.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

SERVICE_NAME = "question.v1.CategoryService"


def serialize(message: Any) -> bytes:
    return json.dumps(message, separators=(",", ":")).encode("utf-8")


def deserialize(payload: bytes) -> Any:
    """Decode a request body; undecodable bodies become ``None``.

    Handlers then answer with an input validation error instead of grpcio
    failing the call before it reaches them.
    """
    if not payload:
        return {}
    try:
        return json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("rpc_undecodable_request: size=%d error=%s", len(payload), exc)
        return None


def method_path(method: str) -> str:
    return f"/{SERVICE_NAME}/{method}"
