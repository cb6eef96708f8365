"""아티스트 및 좋아요 Pydantic 요청/응답 스키마 정의.

Artist and ArtistLike Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class ArtistCreate(CamelModel):
    """아티스트 생성 요청 스키마."""

    artist_name: str = Field(..., min_length=1, max_length=255)
    artist_img: str | None = None
    artist_info: str | None = None
    category_id: int | None = None


class ArtistResponse(CamelModel):
    """아티스트 응답 스키마.

    Attributes:
        like_count: 좋아요 수 — is_like=True 행만 집계 (Active likes only)
    """

    id: int
    artist_name: str
    artist_img: str | None
    artist_info: str | None
    category_id: int | None
    like_count: int = 0
    created_at: datetime


class ArtistLikeResponse(CamelModel):
    """좋아요 토글 결과 응답 스키마.

    Result of toggling a like: the caller's new state and the updated total.
    """

    artist_id: int
    is_like: bool
    like_count: int
