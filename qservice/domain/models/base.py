"""
Shared helpers for self-validating domain models.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import List

from qservice.errors.validation import Violation, model_validation_error


def now_iso() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return to_iso(datetime.now(UTC))


def to_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DomainModel(ABC):
    """Base for models that check their own fields on construction and update."""

    entity_prefix: str = ""

    @abstractmethod
    def validate(self) -> List[Violation]: ...

    def ensure_valid(self) -> None:
        violations = self.validate()
        if violations:
            raise model_validation_error(
                violations, self.entity_prefix, f"Invalid {type(self).__name__}"
            )

    @abstractmethod
    def to_json(self) -> dict: ...

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"
