"""아티스트 서비스 — 아티스트 조회/생성 및 좋아요 토글 비즈니스 로직.

Artist Service — Business logic for artist listing/creation and the
per-user like toggle.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.artist import Artist, ArtistLike
from app.models.user import User
from app.repositories.artist_repository import artist_like_repository, artist_repository
from app.repositories.concert_repository import category_repository
from app.schemas.artist import ArtistCreate, ArtistLikeResponse, ArtistResponse
from app.utils.exceptions import NotFoundError


class ArtistService:
    """아티스트 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, artist: Artist, like_count: int) -> ArtistResponse:
        return ArtistResponse(
            id=artist.id,
            artist_name=artist.artist_name,
            artist_img=artist.artist_img,
            artist_info=artist.artist_info,
            category_id=artist.category_id,
            like_count=like_count,
            created_at=artist.created_at,
        )

    async def _with_counts(self, db: AsyncSession, artists: list[Artist]) -> list[ArtistResponse]:
        counts = await artist_like_repository.count_likes_by_artist(db, [a.id for a in artists])
        return [self._to_response(a, counts.get(a.id, 0)) for a in artists]

    async def _get_artist(self, db: AsyncSession, artist_id: int) -> Artist:
        artist: Artist | None = await artist_repository.get_by_id(db, artist_id)
        if artist is None:
            raise NotFoundError("Artist not found")
        return artist

    async def list_artists(
        self,
        db: AsyncSession,
        category_id: int | None = None,
    ) -> list[ArtistResponse]:
        """아티스트 목록을 좋아요 수와 함께 조회합니다 (Artists with like counts)."""
        artists = await artist_repository.get_all(
            db, filters={"category_id": category_id}, order_by=Artist.artist_name
        )
        return await self._with_counts(db, list(artists))

    async def get_artist(self, db: AsyncSession, artist_id: int) -> ArtistResponse:
        """아티스트 상세 정보를 조회합니다 (Artist detail, 404 if missing)."""
        artist: Artist = await self._get_artist(db, artist_id)
        return self._to_response(artist, await artist_like_repository.count_likes(db, artist.id))

    async def create_artist(
        self,
        db: AsyncSession,
        data: ArtistCreate,
    ) -> ArtistResponse:
        """아티스트를 생성합니다.

        Raises:
            NotFoundError: 지정한 카테고리가 없을 때 (Unknown category)
        """
        if data.category_id is not None and await category_repository.get_by_id(db, data.category_id) is None:
            raise NotFoundError("Category not found")
        artist: Artist = await artist_repository.create(db, data.model_dump())
        return self._to_response(artist, 0)

    async def toggle_like(
        self,
        db: AsyncSession,
        user: User,
        artist_id: int,
    ) -> ArtistLikeResponse:
        """아티스트 좋아요를 토글합니다.

        Toggle the current user's like on an artist. The first call creates
        the row with is_like=True; later calls flip is_like.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 인증된 사용자 (Authenticated user)
            artist_id: 아티스트 ID (Artist identifier)

        Returns:
            ArtistLikeResponse: 새 좋아요 상태와 총 좋아요 수 (New state and total)

        Raises:
            NotFoundError: 아티스트가 없을 때 (Unknown artist)
        """
        await self._get_artist(db, artist_id)
        # 롤백 후 만료된 ORM 속성에 접근하지 않도록 ID를 미리 보관
        user_id: int = user.id

        like: ArtistLike | None = await artist_like_repository.get_for_user(db, user_id, artist_id)
        if like is None:
            try:
                like = await artist_like_repository.create(
                    db, {"user_id": user_id, "artist_id": artist_id, "is_like": True}
                )
            except IntegrityError:
                # 동시 요청이 먼저 행을 만든 경우 — Row created concurrently; flip it instead
                await db.rollback()
                like = await artist_like_repository.get_for_user(db, user_id, artist_id)
                if like is None:
                    raise
                like = await artist_like_repository.update(db, like, {"is_like": not like.is_like})
        else:
            like = await artist_like_repository.update(db, like, {"is_like": not like.is_like})

        return ArtistLikeResponse(
            artist_id=artist_id,
            is_like=like.is_like,
            like_count=await artist_like_repository.count_likes(db, artist_id),
        )

    async def list_liked(self, db: AsyncSession, user: User) -> list[ArtistResponse]:
        """사용자가 좋아요한 아티스트 목록을 조회합니다 (Artists the user likes)."""
        artists = await artist_repository.get_liked_by_user(db, user.id)
        return await self._with_counts(db, artists)


# 싱글턴 인스턴스 — Singleton instance
artist_service: ArtistService = ArtistService()
