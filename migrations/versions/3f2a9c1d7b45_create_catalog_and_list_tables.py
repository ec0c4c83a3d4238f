"""Create book, place, list and list_item tables

Revision ID: 3f2a9c1d7b45
Revises: 
Create Date: 2026-10-19 10:12:41.218374

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b45'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('book',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('author', sa.String(length=255), nullable=False),
        sa.Column('isbn', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('isbn')
    )
    op.create_index('idx_book_title', 'book', ['title'])
    op.create_index('idx_book_author', 'book', ['author'])

    op.create_table('place',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_place_lat', 'place', ['lat'])
    op.create_index('idx_place_lng', 'place', ['lng'])

    op.create_table('list',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('visibility', sa.Enum('PUBLIC', 'PRIVATE', name='visibility'), nullable=False),
        sa.Column('owner_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_list_owner_id', 'list', ['owner_id'])
    op.create_index('idx_list_visibility', 'list', ['visibility'])
    op.create_index('idx_list_updated_at', 'list', ['updated_at'])

    # No ON DELETE CASCADE: items are removed explicitly before their list
    op.create_table('list_item',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('list_id', sa.String(length=36), nullable=False),
        sa.Column('book_id', sa.String(length=36), nullable=False),
        sa.Column('place_id', sa.String(length=36), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['list_id'], ['list.id']),
        sa.ForeignKeyConstraint(['book_id'], ['book.id']),
        sa.ForeignKeyConstraint(['place_id'], ['place.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_list_item_list_id_id', 'list_item', ['list_id', 'id'])
    op.create_index('idx_list_item_book_id', 'list_item', ['book_id'])
    op.create_index('idx_list_item_place_id', 'list_item', ['place_id'])


def downgrade() -> None:
    op.drop_table('list_item')
    op.drop_table('list')
    op.drop_table('place')
    op.drop_table('book')
    if op.get_bind().dialect.name == 'postgresql':
        op.execute('DROP TYPE IF EXISTS visibility')
