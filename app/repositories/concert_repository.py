"""공연 및 카테고리 레포지토리.

Concert and Category Repositories — Listing, filtering and uniqueness
queries on top of BaseRepository CRUD.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.concert import Category, Concert
from app.repositories.base import BaseRepository
from app.utils.pagination import paginate


class CategoryRepository(BaseRepository[Category]):
    """카테고리 테이블 레포지토리 (Repository for the categories table)."""

    def __init__(self) -> None:
        super().__init__(Category)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Category | None:
        """이름으로 카테고리를 조회합니다 (Retrieve a category by name)."""
        result = await db.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()


class ConcertRepository(BaseRepository[Concert]):
    """공연 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the concerts table.
    """

    def __init__(self) -> None:
        super().__init__(Concert)

    async def get_page(
        self,
        db: AsyncSession,
        category_id: int | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Concert], int]:
        """공연 목록을 페이지 단위로 조회합니다.

        Retrieve a page of concerts, newest concert_date first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 카테고리 필터 (Optional category filter)
            page: 페이지 번호, 1부터 시작 (Page number, 1-indexed)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            tuple[Sequence[Concert], int]: (공연 목록, 전체 개수)
        """
        query: Select = select(Concert)
        if category_id is not None:
            query = query.where(Concert.category_id == category_id)
        query = query.order_by(Concert.concert_date.desc(), Concert.id.desc())
        return await paginate(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instances
category_repository: CategoryRepository = CategoryRepository()
concert_repository: ConcertRepository = ConcertRepository()
