"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import uuid

from sqlalchemy.dialects import postgresql
from sqlalchemy.types import CHAR, TypeDecorator


class UUIDString(TypeDecorator[str]):
    """UUID column exchanged as a canonical string.

    Native ``uuid`` on PostgreSQL, ``CHAR(36)`` elsewhere (SQLite in tests).
    """

    cache_ok = True
    impl = CHAR(36)

    def load_dialect_impl(self, dialect):  # type: ignore[override]
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.UUID(as_uuid=False))
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return str(value)
        return str(value).lower()

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return str(value)
