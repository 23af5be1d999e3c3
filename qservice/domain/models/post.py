"""Post domain model."""
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


class Post(DomainModel):
    entity_prefix = EntityPrefix.POST.value

    def __init__(
        self,
        title: str,
        content: str,
        author_id: str,
        id: Optional[str] = None,
        created_at: Optional[str] = None,
        updated_at: Optional[str] = None,
    ):
        self._id = id if id is not None else str(uuid.uuid4())
        self._title = title
        self._content = content
        self._author_id = author_id
        self._created_at = created_at if created_at is not None else now_iso()
        self._updated_at = updated_at if updated_at is not None else now_iso()
        self.ensure_valid()

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def author_id(self) -> str:
        return self._author_id

    @property
    def created_at(self) -> str:
        return self._created_at

    @property
    def updated_at(self) -> str:
        return self._updated_at

    def validate(self) -> List[Violation]:
        checks = (
            check_uuid4("id", self._id),
            check_non_empty_string("title", self._title),
            check_non_empty_string("content", self._content),
            check_uuid4("authorId", self._author_id),
            check_iso_datetime("createdAt", self._created_at),
            check_iso_datetime("updatedAt", self._updated_at),
        )
        return [v for v in checks if v is not None]

    def update(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author_id: Optional[str] = None,
        updated_at: Optional[str] = None,
    ) -> "Post":
        changed = False
        if title is not None:
            self._title = title
            changed = True
        if content is not None:
            self._content = content
            changed = True
        if author_id is not None:
            self._author_id = author_id
            changed = True

        if updated_at is not None:
            self._updated_at = updated_at
        elif changed:
            self._updated_at = now_iso()

        if changed:
            self.ensure_valid()
        return self

    def to_json(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "content": self._content,
            "authorId": self._author_id,
            "createdAt": self._created_at,
            "updatedAt": self._updated_at,
        }
