from sqlalchemy import Column, DateTime, Index, String, Text

from qservice.db.types import UUIDString
from .base import Base, now_utc


class Post(Base):
    __tablename__ = 'posts'
    id = Column(UUIDString(), primary_key=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(UUIDString(), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_posts_author_id', 'author_id'),
    )
