"""사용자 관련 Pydantic 요청/응답 스키마 정의.

User Pydantic request/response schema definitions.
Covers sign-up, login, current-user info and profile updates.
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import CamelModel
from app.utils.password import BCRYPT_MAX_BYTES, password_fits


def _check_password_bytes(v: str | None) -> str | None:
    if v is not None and not password_fits(v):
        raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes in UTF-8")
    return v


class UserRegisterRequest(CamelModel):
    """회원가입 요청 스키마.

    Local account sign-up request.

    Attributes:
        email: 이메일 — 로그인 아이디 (Login email, unique)
        nickname: 닉네임 (Display nickname, unique)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
        confirm_password: 비밀번호 확인 (Must equal password)
    """

    email: str = Field(..., min_length=3, max_length=255)
    nickname: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=4, max_length=100)
    confirm_password: str = Field(..., min_length=4, max_length=100)

    @field_validator("password", "confirm_password")
    @classmethod
    def password_within_bcrypt_limit(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserLoginRequest(CamelModel):
    """로그인 요청 스키마 (Email + password login)."""

    email: str
    password: str


class LoginResponse(CamelModel):
    """로그인 응답 스키마.

    Returned by email login. The same token is also set as the "jwt"
    cookie and response header.

    Attributes:
        jwt: JWT 액세스 토큰 (Signed access token)
        nickname: 닉네임 (Logged-in user's nickname)
    """

    jwt: str
    nickname: str


class UserUpdateRequest(CamelModel):
    """회원정보 수정 요청 스키마 (닉네임, 비밀번호).

    Profile update request. Every field is optional but at least one
    must be provided; password changes require a matching confirmation.
    """

    nickname: str | None = Field(default=None, min_length=1, max_length=100)
    password: str | None = Field(default=None, min_length=4, max_length=100)
    confirm_password: str | None = None

    @field_validator("password")
    @classmethod
    def password_within_bcrypt_limit(cls, v: str | None) -> str | None:
        return _check_password_bytes(v)


class UserResponse(CamelModel):
    """사용자 정보 응답 스키마.

    Current user response. Never exposes the password hash.

    Attributes:
        id: 사용자 ID (User identifier)
        email: 이메일 (Login email)
        nickname: 닉네임 (Display nickname)
        profile_img: 프로필 이미지 URL (Profile image URL, nullable)
        provider: 가입 경로 ("local" | "kakao")
        is_admin: 관리자 여부 (Admin flag)
        created_at: 가입 일시 (Sign-up timestamp)
    """

    id: int
    email: str
    nickname: str
    profile_img: str | None = None
    provider: str
    is_admin: bool = False
    created_at: datetime
