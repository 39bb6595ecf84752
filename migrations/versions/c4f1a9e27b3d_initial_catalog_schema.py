"""initial_catalog_schema

Revision ID: c4f1a9e27b3d
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c4f1a9e27b3d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _timestamp_columns():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _library_fk():
    return sa.ForeignKeyConstraint(['library_id'], ['library.id'], ondelete='CASCADE')


def upgrade() -> None:
    op.create_table('library',
        *_entity_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('scope', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('scope')
    )

    op.create_table('user',
        *_entity_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('scope', sa.String(length=1024), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username')
    )

    op.create_table('author',
        *_entity_columns(),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('library_id', sa.Integer(), nullable=False),
        _library_fk(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('library_id', 'last_name', 'first_name', name='uix_author_library_name')
    )
    op.create_index('idx_author_library_id', 'author', ['library_id'])

    for table in ('series', 'story'):
        op.create_table(table,
            *_entity_columns(),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('copyright', sa.String(length=255), nullable=True),
            sa.Column('library_id', sa.Integer(), nullable=False),
            _library_fk(),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('library_id', 'name', name=f'uix_{table}_library_name')
        )
        op.create_index(f'idx_{table}_library_id', table, ['library_id'])

    op.create_table('volume',
        *_entity_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('copyright', sa.String(length=255), nullable=True),
        sa.Column('google_id', sa.String(length=255), nullable=True),
        sa.Column('isbn', sa.String(length=20), nullable=True),
        sa.Column('location', sa.String(length=50), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=True),
        sa.Column('library_id', sa.Integer(), nullable=False),
        _library_fk(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('library_id', 'name', name='uix_volume_library_name')
    )
    op.create_index('idx_volume_library_id', 'volume', ['library_id'])
    op.create_index('idx_volume_isbn', 'volume', ['isbn'])

    # Join tables; each pair can be linked at most once
    for table, related in (('author_series', 'series'), ('author_story', 'story'), ('author_volume', 'volume')):
        op.create_table(table,
            sa.Column('author_id', sa.Integer(), nullable=False),
            sa.Column(f'{related}_id', sa.Integer(), nullable=False),
            sa.Column('principal', sa.Boolean(), nullable=False),
            *_timestamp_columns(),
            sa.ForeignKeyConstraint(['author_id'], ['author.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint([f'{related}_id'], [f'{related}.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('author_id', f'{related}_id')
        )

    op.create_table('series_story',
        sa.Column('series_id', sa.Integer(), nullable=False),
        sa.Column('story_id', sa.Integer(), nullable=False),
        sa.Column('ordinal', sa.Integer(), nullable=True),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['series_id'], ['series.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['story_id'], ['story.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('series_id', 'story_id')
    )

    op.create_table('volume_story',
        sa.Column('volume_id', sa.Integer(), nullable=False),
        sa.Column('story_id', sa.Integer(), nullable=False),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['volume_id'], ['volume.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['story_id'], ['story.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('volume_id', 'story_id')
    )

    op.create_table('access_token',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('scope', sa.String(length=255), nullable=False),
        sa.Column('expires', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token')
    )

    op.create_table('refresh_token',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('access_token', sa.String(length=255), nullable=False),
        sa.Column('expires', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token')
    )


def downgrade() -> None:
    # Drop tables in reverse order
    for table in ('refresh_token', 'access_token', 'volume_story', 'series_story',
                  'author_volume', 'author_story', 'author_series'):
        op.drop_table(table)
    op.drop_index('idx_volume_isbn', table_name='volume')
    op.drop_index('idx_volume_library_id', table_name='volume')
    op.drop_table('volume')
    for table in ('story', 'series', 'author'):
        op.drop_index(f'idx_{table}_library_id', table_name=table)
        op.drop_table(table)
    op.drop_table('user')
    op.drop_table('library')
