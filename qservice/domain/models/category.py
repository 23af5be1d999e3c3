"""
Category domain model.

Categories form a tree through ``parent_id``. Names are unique, which is
enforced by the use cases and the database rather than the model itself.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from qservice.errors import EntityPrefix
from qservice.errors.validation import (
    Violation,
    check_iso_datetime,
    check_non_empty_string,
    check_uuid4,
)
from .base import DomainModel, now_iso


class Category(DomainModel):
    entity_prefix = EntityPrefix.CATEGORY.value

    def __init__(
        self,
        name: str,
        parent_id: Optional[str] = None,
        id: Optional[str] = None,
        created_at: Optional[str] = None,
        updated_at: Optional[str] = None,
    ):
        self._id = id if id is not None else str(uuid.uuid4())
        self._name = name
        self._parent_id = parent_id
        self._created_at = created_at if created_at is not None else now_iso()
        self._updated_at = updated_at if updated_at is not None else now_iso()
        self.ensure_valid()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent_id(self) -> Optional[str]:
        return self._parent_id

    @property
    def created_at(self) -> str:
        return self._created_at

    @property
    def updated_at(self) -> str:
        return self._updated_at

    def validate(self) -> List[Violation]:
        checks = (
            check_uuid4("id", self._id),
            check_non_empty_string("name", self._name),
            check_uuid4("parentId", self._parent_id, optional=True),
            check_iso_datetime("createdAt", self._created_at),
            check_iso_datetime("updatedAt", self._updated_at),
        )
        return [v for v in checks if v is not None]

    def update(self, name: Optional[str] = None, updated_at: Optional[str] = None) -> "Category":
        """Apply changes in place and return ``self``.

        ``updated_at`` is refreshed only when something changed, unless an
        explicit value is passed.
        """
        changed = False
        if name is not None:
            self._name = name
            changed = True

        if updated_at is not None:
            self._updated_at = updated_at
        elif changed:
            self._updated_at = now_iso()

        if changed:
            self.ensure_valid()
        return self

    def to_json(self) -> dict:
        data = {
            "id": self._id,
            "name": self._name,
            "createdAt": self._created_at,
            "updatedAt": self._updated_at,
        }
        if self._parent_id is not None:
            data["parentId"] = self._parent_id
        return data
