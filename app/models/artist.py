"""아티스트 및 좋아요 SQLAlchemy ORM 모델 정의.

Artist and ArtistLike SQLAlchemy ORM model definitions.

Tables:
    - artists: 아티스트 (Performing artists)
    - artist_likes: 사용자-아티스트 좋아요 (User ↔ artist like state)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, Boolean, DateTime, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Artist(Base):
    """아티스트 모델.

    Artist model.

    Attributes:
        id: 고유 식별자 (Primary key)
        category_id: 장르 카테고리 FK (Genre category, optional)
        artist_name: 아티스트 이름 (Artist name)
        artist_img: 이미지 URL (Image URL)
        artist_info: 소개 (Description)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    artist_name: Mapped[str] = mapped_column(String(255), nullable=False)
    artist_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    artist_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    category = relationship("Category", back_populates="artists")
    artist_likes = relationship("ArtistLike", back_populates="artist", cascade="all, delete-orphan")


class ArtistLike(Base):
    """아티스트 좋아요 모델 — 사용자별 좋아요 상태.

    ArtistLike model — One row per (user, artist) pair holding the
    current like state. Unliking flips is_like instead of deleting the row.

    Attributes:
        id: 고유 식별자 (Primary key)
        user_id: 사용자 FK (User foreign key)
        artist_id: 아티스트 FK (Artist foreign key)
        is_like: 좋아요 여부 (Current like state, default False)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last toggle timestamp)

    Constraints:
        uq_artist_like_user_artist: 사용자-아티스트 쌍 고유 (One row per pair)
    """

    __tablename__ = "artist_likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    artist_id: Mapped[int] = mapped_column(Integer, ForeignKey("artists.id", ondelete="CASCADE"), nullable=False)
    is_like: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "artist_id", name="uq_artist_like_user_artist"),
    )

    # 관계 — Relationships
    user = relationship("User", back_populates="artist_likes")
    artist = relationship("Artist", back_populates="artist_likes")
