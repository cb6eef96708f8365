"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures CORS, request logging, health check, local upload serving,
and includes the users/concerts/categories/artists routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.services.storage_service import UPLOADS_DIR, storage_service

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — 쿠키 인증을 위해 credentials 허용, 출처는 설정값으로 제한
# (Credentials allowed for cookie auth, so origins come from settings)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[settings.JWT_COOKIE_NAME],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 로컬 스토리지 모드 — 업로드 파일 정적 서빙 (Serve uploads when S3 is not configured)
if storage_service.is_local:
    app.mount("/uploads", StaticFiles(directory=UPLOADS_DIR, check_dir=False), name="uploads")


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.users import router as users_router  # noqa: E402
from app.api.concerts import router as concerts_router  # noqa: E402
from app.api.categories import router as categories_router  # noqa: E402
from app.api.artists import router as artists_router  # noqa: E402

app.include_router(users_router, prefix="/users", tags=["users"])
app.include_router(concerts_router, prefix="/concerts", tags=["concerts"])
app.include_router(categories_router, prefix="/categories", tags=["categories"])
app.include_router(artists_router, prefix="/artists", tags=["artists"])
