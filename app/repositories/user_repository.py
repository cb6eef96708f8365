"""사용자 레포지토리 — 사용자 조회 및 중복 검사 쿼리.

User Repository — Lookup and uniqueness queries for users.
Extends BaseRepository with email, nickname and social-account lookups.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by login email.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        query: Select = select(User).where(User.email == email)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_nickname(
        self,
        db: AsyncSession,
        nickname: str,
    ) -> User | None:
        """닉네임으로 사용자를 조회합니다 (Retrieve a user by nickname)."""
        query: Select = select(User).where(User.nickname == nickname)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_sns_id(
        self,
        db: AsyncSession,
        provider: str,
        sns_id: str,
    ) -> User | None:
        """소셜 계정 ID로 사용자를 조회합니다.

        Retrieve a social account by (provider, provider-side id).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            provider: 가입 경로 (e.g. "kakao")
            sns_id: 소셜 계정 ID (Provider-side user id)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        query: Select = select(User).where(
            User.provider == provider,
            User.sns_id == sns_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def nickname_taken(
        self,
        db: AsyncSession,
        nickname: str,
        exclude_user_id: int | None = None,
    ) -> bool:
        """닉네임이 이미 사용 중인지 확인합니다.

        Check whether a nickname is used by another user.
        exclude_user_id lets a user keep their own nickname on update.
        """
        user: User | None = await self.get_by_nickname(db, nickname)
        if user is None:
            return False
        return user.id != exclude_user_id


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
