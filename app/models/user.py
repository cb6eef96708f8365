"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
A user is either a local account (email + bcrypt password) or a
social account created through Kakao login.

Tables:
    - users: 사용자 계정 (User accounts)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model — System user account information.
    Email and nickname are globally unique. Social accounts have no
    password hash and are identified by (provider, sns_id).

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        email: 이메일 — 로그인 아이디 (Login email, unique)
        nickname: 닉네임 (Display nickname, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password, null for social accounts)
        profile_img: 프로필 이미지 URL (Profile image URL)
        provider: 가입 경로 (Sign-up provider: "local" or "kakao")
        sns_id: 소셜 계정 ID (Provider-side account id)
        is_admin: 관리자 여부 (May manage concerts, artists, categories)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        artist_likes: 아티스트 좋아요 목록 (Artist likes, cascade delete)

    Constraints:
        uq_user_provider_sns_id: 소셜 계정 고유 (Unique social account per provider)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 이메일 — Login email (전역 고유, globally unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 닉네임 — Display nickname (전역 고유, globally unique)
    nickname: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (소셜 계정은 None)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 프로필 이미지 — Profile image URL (S3 or local uploads)
    profile_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    # 가입 경로 — "local" | "kakao"
    provider: Mapped[str] = mapped_column(String(20), default="local", nullable=False)
    # 소셜 계정 ID — Kakao user id as string
    sns_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("provider", "sns_id", name="uq_user_provider_sns_id"),
    )

    # 관계 — Relationships
    artist_likes = relationship("ArtistLike", back_populates="user", cascade="all, delete-orphan")
