"""initial_schema

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-19 10:00:00.000000

사용자, 카테고리, 공연, 아티스트, 아티스트 좋아요 테이블 생성.
Create users, categories, concerts, artists and artist_likes tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d1'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # users — 로컬 계정 + 카카오 소셜 계정 (Local and Kakao accounts)
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('nickname', sa.String(100), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('profile_img', sa.String(1024), nullable=True),
        sa.Column('provider', sa.String(20), server_default='local', nullable=False),
        sa.Column('sns_id', sa.String(100), nullable=True),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('provider', 'sns_id', name='uq_user_provider_sns_id'),
    )

    # categories — 장르 분류 (Genre categories)
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # concerts — 공연 정보 (Concert listings)
    op.create_table(
        'concerts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('concert_name', sa.String(255), nullable=False),
        sa.Column('concert_img', sa.String(1024), nullable=True),
        sa.Column('concert_info', sa.Text(), nullable=True),
        sa.Column('concert_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ticketing_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('ticketing_url', sa.String(1024), nullable=True),
        sa.Column('calender', sa.String(255), nullable=True),
        sa.Column('play_time', sa.String(100), nullable=True),
        sa.Column('location_name', sa.String(255), nullable=True),
        sa.Column('ratings', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_concerts_category_date', 'concerts', ['category_id', 'concert_date'])

    # artists — 아티스트 (Artists)
    op.create_table(
        'artists',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True),
        sa.Column('artist_name', sa.String(255), nullable=False),
        sa.Column('artist_img', sa.String(1024), nullable=True),
        sa.Column('artist_info', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # artist_likes — 사용자별 좋아요 상태 (one row per user/artist pair)
    op.create_table(
        'artist_likes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('artist_id', sa.Integer(), sa.ForeignKey('artists.id', ondelete='CASCADE'), nullable=False),
        sa.Column('is_like', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'artist_id', name='uq_artist_like_user_artist'),
    )
    op.create_index('ix_artist_likes_artist', 'artist_likes', ['artist_id'])


def downgrade() -> None:
    op.drop_index('ix_artist_likes_artist', table_name='artist_likes')
    op.drop_table('artist_likes')
    op.drop_table('artists')
    op.drop_index('ix_concerts_category_date', table_name='concerts')
    op.drop_table('concerts')
    op.drop_table('categories')
    op.drop_table('users')
