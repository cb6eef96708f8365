"""아티스트 및 좋아요 레포지토리.

Artist and ArtistLike Repositories — Artist listing with like counts
and per-user like state lookups.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.artist import Artist, ArtistLike
from app.repositories.base import BaseRepository


class ArtistRepository(BaseRepository[Artist]):
    """아티스트 테이블 레포지토리.

    Repository for the artists table.
    """

    def __init__(self) -> None:
        super().__init__(Artist)

    async def get_liked_by_user(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> list[Artist]:
        """사용자가 현재 좋아요한 아티스트 목록을 조회합니다.

        Retrieve artists the user currently likes (is_like=True),
        most recently toggled first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User identifier)

        Returns:
            list[Artist]: 아티스트 목록 (Liked artists)
        """
        query: Select = (
            select(Artist)
            .join(ArtistLike, ArtistLike.artist_id == Artist.id)
            .where(ArtistLike.user_id == user_id, ArtistLike.is_like == True)  # noqa: E712
            .order_by(ArtistLike.updated_at.desc(), Artist.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


class ArtistLikeRepository(BaseRepository[ArtistLike]):
    """아티스트 좋아요 테이블 레포지토리.

    Repository for the artist_likes table.
    """

    def __init__(self) -> None:
        super().__init__(ArtistLike)

    async def get_for_user(
        self,
        db: AsyncSession,
        user_id: int,
        artist_id: int,
    ) -> ArtistLike | None:
        """사용자-아티스트 좋아요 행을 조회합니다 (Retrieve the like row for a pair)."""
        result = await db.execute(
            select(ArtistLike).where(
                ArtistLike.user_id == user_id,
                ArtistLike.artist_id == artist_id,
            )
        )
        return result.scalar_one_or_none()

    async def count_likes(
        self,
        db: AsyncSession,
        artist_id: int,
    ) -> int:
        """아티스트의 활성 좋아요 수를 집계합니다 (Count is_like=True rows)."""
        result = await db.execute(
            select(func.count())
            .select_from(ArtistLike)
            .where(ArtistLike.artist_id == artist_id, ArtistLike.is_like == True)  # noqa: E712
        )
        return result.scalar() or 0

    async def count_likes_by_artist(
        self,
        db: AsyncSession,
        artist_ids: list[int],
    ) -> dict[int, int]:
        """여러 아티스트의 좋아요 수를 한 번에 집계합니다.

        Count active likes for several artists in one GROUP BY query.
        Artists with no likes are absent from the returned dict.
        """
        if not artist_ids:
            return {}
        result = await db.execute(
            select(ArtistLike.artist_id, func.count())
            .where(ArtistLike.artist_id.in_(artist_ids), ArtistLike.is_like == True)  # noqa: E712
            .group_by(ArtistLike.artist_id)
        )
        return {artist_id: count for artist_id, count in result.all()}


# 싱글턴 인스턴스 — Singleton instances
artist_repository: ArtistRepository = ArtistRepository()
artist_like_repository: ArtistLikeRepository = ArtistLikeRepository()
