"""카테고리 라우터 (Categories Router)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.concert import CategoryCreate, CategoryResponse
from app.services.concert_service import concert_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CategoryResponse]:
    """카테고리 목록 조회."""
    return await concert_service.list_categories(db)


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> CategoryResponse:
    """카테고리 생성 — 관리자 전용, 이름 중복 시 409."""
    result: CategoryResponse = await concert_service.create_category(db, data)
    await db.commit()
    return result
