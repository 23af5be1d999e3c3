from sqlalchemy import Column, DateTime, ForeignKey, Index, String

from qservice.db.types import UUIDString
from .base import Base, now_utc


class Category(Base):
    __tablename__ = 'categories'
    id = Column(UUIDString(), primary_key=True)
    name = Column(String(255), nullable=False)
    parent_id = Column(UUIDString(), ForeignKey('categories.id', ondelete='RESTRICT'), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('uq_categories_name', 'name', unique=True),
        Index('idx_categories_parent_id', 'parent_id'),
    )
