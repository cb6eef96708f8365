"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 사용자 (Users, local and Kakao accounts)
    concert: 카테고리 및 공연 (Categories and concerts)
    artist: 아티스트 및 좋아요 (Artists and artist likes)
"""

from app.models.user import User
from app.models.concert import Category, Concert
from app.models.artist import Artist, ArtistLike

__all__ = [
    "User",
    "Category", "Concert",
    "Artist", "ArtistLike",
]
