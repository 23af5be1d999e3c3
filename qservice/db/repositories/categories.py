"""
Category repository backed by SQLAlchemy.

Implements the category contract, including path validation and the
children check used before deletes. Every method runs in its own session.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.exc import IntegrityError

from qservice.db import models
from qservice.db.database import Datasource
from qservice.db.mappers import CategoryMapper, parse_timestamp
from qservice.domain import Category, CategoryRepository, FindAllCategoriesInput
from qservice.errors import AlreadyExistsError, BadRequestError, EntityPrefix, NotFoundError

logger = logging.getLogger(__name__)

_ENTITY = EntityPrefix.CATEGORY.value


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlCategoryRepository(CategoryRepository):
    def __init__(self, datasource: Datasource):
        self.datasource = datasource

    def create(self, category: Category) -> Category:
        row = CategoryMapper.to_persistence(category)
        with self.datasource.session() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                name_taken = (
                    db.query(models.Category.id)
                    .filter(models.Category.name == category.name)
                    .first()
                )
                if name_taken:
                    raise AlreadyExistsError(
                        f"Category with name '{category.name}' already exists", entity=_ENTITY
                    ) from exc
                raise NotFoundError(
                    f"Parent category with id '{category.parent_id}' not found", entity=_ENTITY
                ) from exc
            db.refresh(row)
            return CategoryMapper.to_domain(row)

    def find_all(self, criteria: FindAllCategoriesInput) -> List[Category]:
        with self.datasource.session() as db:
            q = db.query(models.Category)
            if criteria.query:
                q = q.filter(models.Category.name.ilike(_like_pattern(criteria.query), escape="\\"))
            f = criteria.filter
            if f is not None:
                if f.ids:
                    q = q.filter(models.Category.id.in_(f.ids))
                if f.path:
                    q = q.filter(models.Category.parent_id == f.path[-1])
                if f.is_root:
                    q = q.filter(models.Category.parent_id.is_(None))
            rows = q.order_by(models.Category.created_at, models.Category.name).all()
            return [CategoryMapper.to_domain(r) for r in rows]

    def find_one(self, id: str) -> Optional[Category]:
        with self.datasource.session() as db:
            row = db.get(models.Category, id)
            return CategoryMapper.to_domain(row) if row else None

    def find_one_by_name(self, name: str) -> Optional[Category]:
        with self.datasource.session() as db:
            row = db.query(models.Category).filter(models.Category.name == name).first()
            return CategoryMapper.to_domain(row) if row else None

    def update(self, id: str, changes: dict) -> Category:
        with self.datasource.session() as db:
            row = db.get(models.Category, id)
            if row is None:
                raise NotFoundError(f"Category with id '{id}' not found", entity=_ENTITY)
            if "name" in changes:
                row.name = changes["name"]
            if changes.get("updatedAt") is not None:
                row.updated_at = parse_timestamp(changes["updatedAt"])
            elif changes:
                row.updated_at = models.now_utc()
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise AlreadyExistsError(
                    f"Category with name '{changes.get('name')}' already exists", entity=_ENTITY
                ) from exc
            db.refresh(row)
            return CategoryMapper.to_domain(row)

    def delete(self, id: str) -> None:
        self.delete_many([id])

    def delete_many(self, ids: List[str]) -> None:
        if not ids:
            return
        with self.datasource.session() as db:
            try:
                db.query(models.Category).filter(models.Category.id.in_(ids)).delete(synchronize_session=False)
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise BadRequestError(
                    "There are ids that have children, delete the children first", entity=_ENTITY
                ) from exc
        logger.debug("categories_delete: ids=%s", ids)

    def validate_category_path(self, path: List[str]) -> bool:
        if not path:
            return True

        segments = [and_(models.Category.parent_id.is_(None), models.Category.id == path[0])]
        segments.extend(
            and_(models.Category.parent_id == parent, models.Category.id == child)
            for parent, child in zip(path, path[1:])
        )
        with self.datasource.session() as db:
            count = db.query(func.count(models.Category.id)).filter(or_(*segments)).scalar()
        return count == len(path)

    def has_children(self, ids: List[str]) -> bool:
        if not ids:
            return False
        with self.datasource.session() as db:
            child = (
                db.query(models.Category.id)
                .filter(models.Category.parent_id.in_(ids))
                .first()
            )
        return child is not None
