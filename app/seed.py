"""초기 데이터 시드 스크립트 — 기본 카테고리 및 관리자 계정 생성.

Seed script — Creates default categories and an admin account.
Run this script once to bootstrap the database with required initial data.

Usage:
    python -m app.seed

Creates:
    - 기본 카테고리: 발라드, 힙합, 아이돌, 인디, 록, 트로트 (Default genre categories)
    - 1개 관리자 계정: admin@tgle.ml / admin123 (1 admin user)
"""

import asyncio

from sqlalchemy import select

from app.database import async_session, engine, Base
from app.models import Category, User
from app.utils.password import hash_password

DEFAULT_CATEGORIES: list[str] = ["발라드", "힙합", "아이돌", "인디", "록", "트로트"]
ADMIN_EMAIL: str = "admin@tgle.ml"


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if they don't exist, then insert missing categories
    and the admin user. Idempotent: existing rows are left alone.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        existing = set((await db.execute(select(Category.name))).scalars().all())
        created: list[str] = [name for name in DEFAULT_CATEGORIES if name not in existing]
        for name in created:
            db.add(Category(name=name))

        admin = (await db.execute(select(User).where(User.email == ADMIN_EMAIL))).scalar_one_or_none()
        if admin is None:
            db.add(
                User(
                    email=ADMIN_EMAIL,
                    nickname="admin",
                    password_hash=hash_password("admin123"),
                    provider="local",
                    is_admin=True,
                )
            )

        await db.commit()
        print(f"Seeded: categories={created or 'none'}, admin={'exists' if admin else ADMIN_EMAIL + '/admin123'}")


if __name__ == "__main__":
    asyncio.run(seed())
