"""
Shared SQLAlchemy base and helpers.
"""
from datetime import UTC, datetime

from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base()
