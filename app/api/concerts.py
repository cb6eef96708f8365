"""공연 라우터 — 공연 목록/상세 조회 및 관리자 CRUD.

Concerts Router — Public listing/detail and admin-only create/update/delete.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.concert import ConcertResponse, CreateConcertRequest, UpdateConcertRequest
from app.services.concert_service import concert_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page[ConcertResponse])
async def list_concerts(
    db: Annotated[AsyncSession, Depends(get_db)],
    category_id: Annotated[int | None, Query()] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> Page[ConcertResponse]:
    """공연 목록 조회 — 최신 공연일 순 (Concerts, newest date first)."""
    return await concert_service.list_concerts(db, category_id, page, per_page)


@router.get("/{concert_id}", response_model=ConcertResponse)
async def get_concert(
    concert_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ConcertResponse:
    """공연 상세 조회 (Concert detail)."""
    return await concert_service.get_concert(db, concert_id)


@router.post("", response_model=ConcertResponse, status_code=201)
async def create_concert(
    data: CreateConcertRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> ConcertResponse:
    """공연 생성 — 관리자 전용 (Admin only)."""
    result: ConcertResponse = await concert_service.create_concert(db, data)
    await db.commit()
    return result


@router.put("/{concert_id}", response_model=ConcertResponse)
async def update_concert(
    concert_id: int,
    data: UpdateConcertRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> ConcertResponse:
    """공연 수정 — 관리자 전용, 부분 업데이트 (Admin only, partial update)."""
    result: ConcertResponse = await concert_service.update_concert(db, concert_id, data)
    await db.commit()
    return result


@router.delete("/{concert_id}", response_model=MessageResponse)
async def delete_concert(
    concert_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    """공연 삭제 — 관리자 전용 (Admin only)."""
    await concert_service.delete_concert(db, concert_id)
    await db.commit()
    return MessageResponse(message="Concert deleted")
