"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Every test gets a fresh schema; the app's get_db dependency is overridden
to share the test session. Uploads go to a temporary directory.
"""

import os
import tempfile
from collections.abc import AsyncGenerator

# 앱 임포트 전에 환경 설정 — Configure env before the app modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOCAL_UPLOADS_DIR", tempfile.mkdtemp(prefix="tgle-uploads-"))
os.environ.setdefault("AWS_ACCESS_KEY_ID", "")
os.environ.setdefault("AWS_S3_BUCKET", "")
os.environ.setdefault("AXIOM_API_TOKEN", "")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.utils.jwt import build_user_claims, create_access_token  # noqa: E402
from app.utils.password import hash_password  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 매 테스트마다 스키마를 새로 만듭니다."""
    eng = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _make_user(db: AsyncSession, email: str, nickname: str, password: str, is_admin: bool = False):
    from app.models.user import User
    user = User(
        email=email,
        nickname=nickname,
        password_hash=hash_password(password),
        provider="local",
        is_admin=is_admin,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def user(db: AsyncSession):
    """일반 사용자를 생성합니다 (fan@tgle.ml / fan12345)."""
    return await _make_user(db, "fan@tgle.ml", "fan", "fan12345")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession):
    """두 번째 일반 사용자를 생성합니다."""
    return await _make_user(db, "other@tgle.ml", "other", "other12345")


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession):
    """관리자 사용자를 생성합니다."""
    return await _make_user(db, "admin@tgle.ml", "admin", "admin12345", is_admin=True)


@pytest_asyncio.fixture
async def category(db: AsyncSession):
    """테스트 카테고리를 생성합니다."""
    from app.models.concert import Category
    c = Category(name="발라드")
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def concert(db: AsyncSession, category):
    """테스트 공연을 생성합니다."""
    from app.models.concert import Concert
    c = Concert(
        category_id=category.id,
        concert_name="가을 콘서트",
        concert_date=datetime(2026, 11, 1, 19, 0, tzinfo=timezone.utc),
        location_name="올림픽홀",
        ratings="전체관람가",
    )
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def artist(db: AsyncSession, category):
    """테스트 아티스트를 생성합니다."""
    from app.models.artist import Artist
    a = Artist(artist_name="아이유", category_id=category.id)
    db.add(a)
    await db.flush()
    await db.refresh(a)
    return a


def make_token(user) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(build_user_claims(user))


@pytest.fixture
def user_token(user) -> str:
    return make_token(user)


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
