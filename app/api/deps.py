"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더 또는 "jwt" 쿠키를 전송
       (Client sends the token as a Bearer header or as the "jwt" cookie)
    2. 헤더가 우선, 없으면 쿠키 사용 (Header wins; cookie is the fallback)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)
"""

from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.models.user import User
from app.repositories.user_repository import user_repository
from app.utils.exceptions import ForbiddenError
from app.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — auto_error=False: 쿠키 대체 경로 허용
# (Extracts the Bearer token; missing header falls through to the cookie)
security: HTTPBearer = HTTPBearer(auto_error=False, scheme_name="jwt")


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.JWT_COOKIE_NAME)


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the JWT from the Authorization header (or "jwt" cookie) and
    return the authenticated user.

    Args:
        request: 요청 객체 — 쿠키 조회용 (Request, used for the cookie fallback)
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer credentials, may be None)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        User: 인증된 사용자 ORM 인스턴스 (Authenticated user ORM instance)

    Raises:
        HTTPException(401): 토큰 없음, 유효하지 않음, 만료 또는 사용자 없음
                            (Missing, invalid or expired token, or unknown user)
    """
    token: str | None = _extract_token(request, credentials)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    try:
        payload: dict = decode_token(token)
        if payload.get("type") != "access":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
        user_id: int = int(payload["sub"])
    except HTTPException:
        raise
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return user


async def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """관리자 권한 검사 — 공연/아티스트/카테고리 관리 엔드포인트용.

    Dependency allowing only admin users through; others get 403.
    """
    if not current_user.is_admin:
        raise ForbiddenError()
    return current_user
