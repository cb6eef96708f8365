"""공연 및 카테고리 SQLAlchemy ORM 모델 정의.

Concert and Category SQLAlchemy ORM model definitions.

Tables:
    - categories: 공연/아티스트 장르 분류 (Genre categories)
    - concerts: 공연 정보 (Concert listings with ticketing info)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Category(Base):
    """카테고리 모델 — 공연과 아티스트의 장르 분류.

    Category model — Genre grouping shared by concerts and artists.

    Attributes:
        id: 고유 식별자 (Primary key)
        name: 카테고리 이름 (Category name, unique)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    concerts = relationship("Concert", back_populates="category")
    artists = relationship("Artist", back_populates="category")


class Concert(Base):
    """공연 모델 — 공연 일정 및 예매 정보.

    Concert model — Concert schedule and ticketing information.

    Attributes:
        id: 고유 식별자 (Primary key)
        category_id: 카테고리 FK (Category foreign key)
        concert_name: 공연명 (Concert title)
        concert_img: 포스터 이미지 URL (Poster image URL)
        concert_info: 공연 소개 (Description)
        concert_date: 공연 일시 (Performance date)
        ticketing_date: 예매 오픈 일시 (Ticket sale opening)
        ticketing_url: 예매처 URL (Ticket vendor URL)
        calender: 공연 기간 표시 문자열 (Run period as displayed, e.g. "2022.10.01 ~ 2022.10.02")
        play_time: 공연 시간 (Running time, e.g. "120분")
        location_name: 공연장 이름 (Venue name)
        ratings: 관람 등급 (Age rating)
    """

    __tablename__ = "concerts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 카테고리 FK — 카테고리 삭제 시 제한됨 (Category deletion is restricted)
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("categories.id"), nullable=False)
    concert_name: Mapped[str] = mapped_column(String(255), nullable=False)
    concert_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    concert_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    concert_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ticketing_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    ticketing_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    calender: Mapped[str | None] = mapped_column(String(255), nullable=True)
    play_time: Mapped[str | None] = mapped_column(String(100), nullable=True)
    location_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ratings: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    category = relationship("Category", back_populates="concerts")
