"""create_artworks_users_favorites

Revision ID: 4f1c2a7d9b31
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a7d9b31'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'artworks',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('medium', sa.String(), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('dimensions', sa.String(), nullable=False, server_default=''),
        sa.Column('price', sa.String(), nullable=False, server_default=''),
        sa.Column('visibility', sa.String(), nullable=False, server_default='Public'),
        sa.Column('artist_email', sa.String(), nullable=False),
        sa.Column('artist_name', sa.String(), nullable=False),
        sa.Column('artist_photo', sa.String(), nullable=True),
        sa.Column('likes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('likes >= 0', name='artwork_likes_non_negative'),
    )
    op.create_index('ix_artworks_title', 'artworks', ['title'])
    op.create_index('ix_artworks_category', 'artworks', ['category'])
    op.create_index('ix_artworks_visibility', 'artworks', ['visibility'])
    op.create_index('ix_artworks_artist_email', 'artworks', ['artist_email'])
    op.create_index('ix_artworks_created_at', 'artworks', ['created_at'])

    # Liked-by set
    op.create_table(
        'artwork_likes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('artwork_id', sa.String(length=36), sa.ForeignKey('artworks.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_email', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('artwork_id', 'user_email', name='unique_artwork_like'),
    )
    op.create_index('ix_artwork_likes_artwork_id', 'artwork_likes', ['artwork_id'])
    op.create_index('ix_artwork_likes_user_email', 'artwork_likes', ['user_email'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('photo_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # No foreign key: favorites outlive deleted artworks
    op.create_table(
        'favorites',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_email', sa.String(), nullable=False),
        sa.Column('artwork_id', sa.String(length=36), nullable=False),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('user_email', 'artwork_id', name='unique_favorite'),
    )
    op.create_index('ix_favorites_user_email', 'favorites', ['user_email'])
    op.create_index('ix_favorites_artwork_id', 'favorites', ['artwork_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('favorites')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    op.drop_table('artwork_likes')
    op.drop_table('artworks')
