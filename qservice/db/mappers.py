"""
Conversion between ORM rows and domain models.

Rows hold ``datetime`` values; domain models hold ISO-8601 strings.
"""
from datetime import UTC, datetime
from typing import Optional

from qservice.db import models
from qservice.domain.models import Category, Post, to_iso


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class CategoryMapper:
    @staticmethod
    def to_domain(row: models.Category) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            parent_id=row.parent_id,
            created_at=to_iso(row.created_at),
            updated_at=to_iso(row.updated_at),
        )

    @staticmethod
    def to_persistence(category: Category) -> models.Category:
        return models.Category(
            id=category.id,
            name=category.name,
            parent_id=category.parent_id,
            created_at=parse_timestamp(category.created_at),
            updated_at=parse_timestamp(category.updated_at),
        )


class PostMapper:
    @staticmethod
    def to_domain(row: models.Post) -> Post:
        return Post(
            id=row.id,
            title=row.title,
            content=row.content,
            author_id=row.author_id,
            created_at=to_iso(row.created_at),
            updated_at=to_iso(row.updated_at),
        )

    @staticmethod
    def to_persistence(post: Post) -> models.Post:
        return models.Post(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            created_at=parse_timestamp(post.created_at),
            updated_at=parse_timestamp(post.updated_at),
        )
