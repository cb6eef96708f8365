"""아티스트 라우터 — 아티스트 조회/생성 및 좋아요.

Artists Router — Artist listing/detail, admin creation, and the
per-user like toggle.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.artist import ArtistCreate, ArtistLikeResponse, ArtistResponse
from app.services.artist_service import artist_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ArtistResponse])
async def list_artists(
    db: Annotated[AsyncSession, Depends(get_db)],
    category_id: Annotated[int | None, Query()] = None,
) -> list[ArtistResponse]:
    """아티스트 목록 조회 — 좋아요 수 포함 (Artists with like counts)."""
    return await artist_service.list_artists(db, category_id)


# /{artist_id}보다 먼저 등록 — Must be registered before /{artist_id}
@router.get("/liked", response_model=list[ArtistResponse])
async def list_liked_artists(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> list[ArtistResponse]:
    """내가 좋아요한 아티스트 목록 (Artists the current user likes)."""
    return await artist_service.list_liked(db, current_user)


@router.get("/{artist_id}", response_model=ArtistResponse)
async def get_artist(
    artist_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ArtistResponse:
    """아티스트 상세 조회."""
    return await artist_service.get_artist(db, artist_id)


@router.post("", response_model=ArtistResponse, status_code=201)
async def create_artist(
    data: ArtistCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> ArtistResponse:
    """아티스트 생성 — 관리자 전용 (Admin only)."""
    result: ArtistResponse = await artist_service.create_artist(db, data)
    await db.commit()
    return result


@router.post("/{artist_id}/like", response_model=ArtistLikeResponse)
async def toggle_artist_like(
    artist_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ArtistLikeResponse:
    """아티스트 좋아요 토글.

    Toggle the current user's like. Returns the new state and like count.
    """
    result: ArtistLikeResponse = await artist_service.toggle_like(db, current_user, artist_id)
    await db.commit()
    return result
