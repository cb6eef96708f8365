"""공연 및 카테고리 Pydantic 요청/응답 스키마 정의.

Concert and Category Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


# === 카테고리 (Category) 스키마 ===

class CategoryCreate(CamelModel):
    """카테고리 생성 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=100)


class CategoryResponse(CamelModel):
    """카테고리 응답 스키마."""

    id: int
    name: str


# === 공연 (Concert) 스키마 ===

class CreateConcertRequest(CamelModel):
    """공연 생성 요청 스키마.

    Concert creation request. Wire names are camelCase
    (categoryId, concertName, concertImg, concertInfo, concertDate,
    ticketingDate, ticketingUrl, calender, playTime, locationName, ratings).
    """

    category_id: int
    concert_name: str = Field(..., min_length=1, max_length=255)
    concert_img: str | None = None
    concert_info: str | None = None
    concert_date: datetime
    ticketing_date: datetime | None = None
    ticketing_url: str | None = None
    calender: str | None = None
    play_time: str | None = None
    location_name: str | None = None
    ratings: str | None = None


class UpdateConcertRequest(CamelModel):
    """공연 수정 요청 스키마 (부분 업데이트).

    Partial concert update; only provided fields are applied.
    """

    category_id: int | None = None
    concert_name: str | None = Field(default=None, min_length=1, max_length=255)
    concert_img: str | None = None
    concert_info: str | None = None
    concert_date: datetime | None = None
    ticketing_date: datetime | None = None
    ticketing_url: str | None = None
    calender: str | None = None
    play_time: str | None = None
    location_name: str | None = None
    ratings: str | None = None


class ConcertResponse(CamelModel):
    """공연 응답 스키마."""

    id: int
    category_id: int
    concert_name: str
    concert_img: str | None
    concert_info: str | None
    concert_date: datetime
    ticketing_date: datetime | None
    ticketing_url: str | None
    calender: str | None
    play_time: str | None
    location_name: str | None
    ratings: str | None
    created_at: datetime
