"""
Post repository backed by SQLAlchemy.
"""
from __future__ import annotations

from typing import List, Optional

from qservice.db import models
from qservice.db.database import Datasource
from qservice.db.mappers import PostMapper, parse_timestamp
from qservice.domain import Post, PostRepository
from qservice.errors import EntityPrefix, NotFoundError

_UPDATABLE = {"title": "title", "content": "content", "authorId": "author_id"}


class SqlPostRepository(PostRepository):
    def __init__(self, datasource: Datasource):
        self.datasource = datasource

    def create(self, post: Post) -> Post:
        row = PostMapper.to_persistence(post)
        with self.datasource.session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            return PostMapper.to_domain(row)

    def find_one(self, id: str) -> Optional[Post]:
        with self.datasource.session() as db:
            row = db.get(models.Post, id)
            return PostMapper.to_domain(row) if row else None

    def find_by_author(self, author_id: str) -> List[Post]:
        with self.datasource.session() as db:
            rows = (
                db.query(models.Post)
                .filter(models.Post.author_id == author_id)
                .order_by(models.Post.created_at.desc())
                .all()
            )
            return [PostMapper.to_domain(r) for r in rows]

    def update(self, id: str, changes: dict) -> Post:
        with self.datasource.session() as db:
            row = db.get(models.Post, id)
            if row is None:
                raise NotFoundError("Post not found", entity=EntityPrefix.POST.value)
            for key, attr in _UPDATABLE.items():
                if key in changes:
                    setattr(row, attr, changes[key])
            if changes.get("updatedAt") is not None:
                row.updated_at = parse_timestamp(changes["updatedAt"])
            elif changes:
                row.updated_at = models.now_utc()
            db.commit()
            db.refresh(row)
            return PostMapper.to_domain(row)

    def delete(self, id: str) -> None:
        with self.datasource.session() as db:
            db.query(models.Post).filter(models.Post.id == id).delete(synchronize_session=False)
            db.commit()
