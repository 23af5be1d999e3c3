"""Create categories and posts tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2025-01-01 10:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e6f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column(
            'parent_id',
            postgresql.UUID(as_uuid=False),
            sa.ForeignKey('categories.id', ondelete='RESTRICT'),
            nullable=True,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('uq_categories_name', 'categories', ['name'], unique=True)
    op.create_index('idx_categories_parent_id', 'categories', ['parent_id'], unique=False)

    op.create_table(
        'posts',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False, primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('idx_posts_author_id', 'posts', ['author_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_posts_author_id', table_name='posts')
    op.drop_table('posts')
    op.drop_index('idx_categories_parent_id', table_name='categories')
    op.drop_index('uq_categories_name', table_name='categories')
    op.drop_table('categories')
