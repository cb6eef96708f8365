"""공연 서비스 — 공연 및 카테고리 CRUD 비즈니스 로직.

Concert Service — Business logic for concert and category CRUD.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.concert import Category, Concert
from app.repositories.concert_repository import category_repository, concert_repository
from app.schemas.concert import (
    CategoryCreate,
    CategoryResponse,
    ConcertResponse,
    CreateConcertRequest,
    UpdateConcertRequest,
)
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.utils.pagination import Page


class ConcertService:
    """공연 관련 비즈니스 로직을 처리하는 서비스.

    Service handling concert and category business logic.
    """

    async def _ensure_category(self, db: AsyncSession, category_id: int) -> Category:
        category: Category | None = await category_repository.get_by_id(db, category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def _get_concert(self, db: AsyncSession, concert_id: int) -> Concert:
        concert: Concert | None = await concert_repository.get_by_id(db, concert_id)
        if concert is None:
            raise NotFoundError("Concert not found")
        return concert

    # --- Category ---

    async def list_categories(self, db: AsyncSession) -> list[CategoryResponse]:
        """카테고리 목록을 이름순으로 조회합니다 (Categories ordered by name)."""
        categories = await category_repository.get_all(db, order_by=Category.name)
        return [CategoryResponse.model_validate(c) for c in categories]

    async def create_category(
        self,
        db: AsyncSession,
        data: CategoryCreate,
    ) -> CategoryResponse:
        """카테고리를 생성합니다.

        Raises:
            DuplicateError: 같은 이름의 카테고리가 있을 때 (Name taken)
        """
        if await category_repository.get_by_name(db, data.name) is not None:
            raise DuplicateError("Category already exists")
        category: Category = await category_repository.create(db, {"name": data.name})
        return CategoryResponse.model_validate(category)

    # --- Concert ---

    async def list_concerts(
        self,
        db: AsyncSession,
        category_id: int | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Page[ConcertResponse]:
        """공연 목록을 페이지 단위로 조회합니다.

        Retrieve a page of concerts, newest concert date first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 카테고리 필터 (Optional category filter)
            page: 페이지 번호 (Page number, 1-indexed)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            Page[ConcertResponse]: 페이지네이션 결과 (Paginated concerts)
        """
        items, total = await concert_repository.get_page(db, category_id, page, per_page)
        return Page[ConcertResponse].build(
            items=[ConcertResponse.model_validate(c) for c in items],
            total=total,
            page=page,
            per_page=per_page,
        )

    async def get_concert(self, db: AsyncSession, concert_id: int) -> ConcertResponse:
        """공연 상세 정보를 조회합니다 (Concert detail, 404 if missing)."""
        return ConcertResponse.model_validate(await self._get_concert(db, concert_id))

    async def create_concert(
        self,
        db: AsyncSession,
        data: CreateConcertRequest,
    ) -> ConcertResponse:
        """공연을 생성합니다.

        Create a concert under an existing category.

        Raises:
            NotFoundError: 카테고리가 없을 때 (Unknown category)
        """
        await self._ensure_category(db, data.category_id)
        concert: Concert = await concert_repository.create(db, data.model_dump())
        return ConcertResponse.model_validate(concert)

    async def update_concert(
        self,
        db: AsyncSession,
        concert_id: int,
        data: UpdateConcertRequest,
    ) -> ConcertResponse:
        """공연 정보를 부분 수정합니다.

        Apply only the fields present in the request body.

        Raises:
            NotFoundError: 공연 또는 카테고리가 없을 때 (Unknown concert or category)
            BadRequestError: 필수 컬럼을 null로 지정할 때 (Null for a required column)
        """
        concert: Concert = await self._get_concert(db, concert_id)
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True)

        for required in ("category_id", "concert_name", "concert_date"):
            if required in update_data and update_data[required] is None:
                raise BadRequestError(f"{required} cannot be null")

        if "category_id" in update_data:
            await self._ensure_category(db, update_data["category_id"])

        concert = await concert_repository.update(db, concert, update_data)
        return ConcertResponse.model_validate(concert)

    async def delete_concert(self, db: AsyncSession, concert_id: int) -> None:
        """공연을 삭제합니다 (Delete a concert, 404 if missing)."""
        concert: Concert = await self._get_concert(db, concert_id)
        await concert_repository.delete(db, concert)


# 싱글턴 인스턴스 — Singleton instance
concert_service: ConcertService = ConcertService()
