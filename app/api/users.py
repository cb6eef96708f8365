"""사용자 라우터 — 회원가입, 로그인, 카카오 로그인, 회원정보, 로그아웃.

Users Router — Sign-up, nickname check, login, Kakao OAuth login,
current-user info, profile updates and logout.
The issued JWT is returned in the body, the "jwt" response header and
the "jwt" cookie.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.config import settings
from app.database import get_db
from app.models.user import User
from app.schemas.common import SuccessResponse
from app.schemas.user import (
    LoginResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.services.kakao_service import kakao_service
from app.services.user_service import SocialLoginResult, user_service

router: APIRouter = APIRouter()


def _set_jwt_cookie(response: Response, token: str) -> None:
    response.set_cookie(settings.JWT_COOKIE_NAME, token, samesite="lax")


@router.post("/signup", response_model=UserResponse, status_code=201)
async def sign_up(
    data: UserRegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserResponse:
    """회원가입.

    Create a local account. 409 when the email or nickname is taken,
    400 when the password confirmation does not match.
    """
    result: UserResponse = await user_service.register_user(db, data)
    await db.commit()
    return result


@router.get("/signup", response_model=SuccessResponse)
async def check_nickname(
    nickname: Annotated[str, Query(min_length=1, max_length=100)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SuccessResponse:
    """닉네임 중복 검사 — 사용 중이면 409 (Nickname availability check)."""
    message: str = await user_service.check_nickname(db, nickname)
    return SuccessResponse(message=message)


@router.post("/login", response_model=LoginResponse)
async def log_in(
    data: UserLoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """로그인.

    Verify email/password and issue a JWT. The token is also set as the
    "jwt" cookie and "jwt" response header.
    """
    result: LoginResponse = await user_service.verify_user_and_sign_jwt(
        db, data.email, data.password
    )
    _set_jwt_cookie(response, result.jwt)
    response.headers[settings.JWT_COOKIE_NAME] = result.jwt
    return result


@router.get("/kakao", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
async def kakao_login() -> RedirectResponse:
    """카카오 로그인 — 카카오 인가 페이지로 리다이렉트합니다."""
    return RedirectResponse(kakao_service.build_authorize_url(), status_code=status.HTTP_302_FOUND)


@router.get("/oauth/kakao/callback", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
async def kakao_callback(
    code: Annotated[str, Query(min_length=1)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RedirectResponse:
    """카카오 로그인 콜백.

    Exchange the authorization code, log in or sign up the Kakao account,
    set the "jwt" cookie and redirect to the frontend.
    """
    result: SocialLoginResult = await user_service.kakao_login(db, code)
    await db.commit()

    redirect = RedirectResponse(settings.FRONTEND_URL, status_code=status.HTTP_302_FOUND)
    _set_jwt_cookie(redirect, result.jwt)
    return redirect


@router.get("/userinfo", response_model=UserResponse)
async def get_current_user_info(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """회원정보 조회 (Current user info)."""
    return UserResponse.model_validate(current_user)


@router.put("/userinfo", response_model=SuccessResponse)
async def update_user_info(
    data: UserUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> SuccessResponse:
    """회원정보 수정 (닉네임, 비밀번호).

    Update nickname and/or password. 401 when no field is provided.
    """
    await user_service.update_user_info(db, current_user, data)
    await db.commit()
    return SuccessResponse(message="수정성공")


@router.put("/userinfo/upload", response_model=UserResponse)
async def update_user_img(
    profile_img: Annotated[UploadFile, File(alias="profileImg")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """회원정보 수정 (프로필사진).

    Upload a profile image (multipart field "profileImg") and store its URL.
    """
    content: bytes = await profile_img.read()
    result: UserResponse = await user_service.update_user_img(
        db,
        current_user,
        filename=profile_img.filename or "profile",
        content_type=profile_img.content_type or "application/octet-stream",
        data=content,
    )
    await db.commit()
    return result


@router.post("/logout", response_model=SuccessResponse)
async def log_out(response: Response) -> SuccessResponse:
    """로그아웃 — "jwt" 쿠키를 삭제합니다 (Clears the jwt cookie)."""
    response.delete_cookie(settings.JWT_COOKIE_NAME)
    return SuccessResponse(message="로그아웃 되었습니다")
