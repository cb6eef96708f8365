"""사용자 서비스 — 회원가입, 로그인, 카카오 로그인, 회원정보 수정 비즈니스 로직.

User Service — Business logic for sign-up, login, Kakao social login,
current-user retrieval and profile updates.
"""

import logging
import secrets
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.user_repository import user_repository
from app.schemas.user import (
    LoginResponse,
    UserRegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.services.kakao_service import KakaoProfile, kakao_service
from app.services.storage_service import storage_service
from app.utils.exceptions import (
    BadRequestError,
    DuplicateError,
    UnauthorizedError,
)
from app.utils.jwt import build_user_claims, create_access_token
from app.utils.password import hash_password, passwords_match, verify_password

logger = logging.getLogger(__name__)

KAKAO_PROVIDER = "kakao"
PROFILE_IMAGE_FOLDER = "users"


@dataclass
class SocialLoginResult:
    """소셜 로그인 결과 — type은 "login"(기존 계정) 또는 "signup"(신규 생성)."""

    jwt: str
    nickname: str
    type: str


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling user business logic.
    """

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)

    def _issue_token(self, user: User) -> str:
        return create_access_token(build_user_claims(user))

    async def register_user(
        self,
        db: AsyncSession,
        data: UserRegisterRequest,
    ) -> UserResponse:
        """로컬 계정 회원가입을 처리합니다.

        Create a local account with a bcrypt-hashed password.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Sign-up request)

        Returns:
            UserResponse: 생성된 사용자 (Created user)

        Raises:
            BadRequestError: 비밀번호 확인이 일치하지 않을 때 (Confirmation mismatch)
            DuplicateError: 이메일 또는 닉네임이 이미 사용 중일 때 (Email or nickname taken)
        """
        if not passwords_match(data.password, data.confirm_password):
            raise BadRequestError("비밀번호가 일치하지 않습니다")

        if await user_repository.get_by_email(db, data.email) is not None:
            raise DuplicateError("이미 가입된 이메일입니다")

        if await user_repository.nickname_taken(db, data.nickname):
            raise DuplicateError("이미 사용중인 닉네임입니다")

        try:
            user: User = await user_repository.create(
                db,
                {
                    "email": data.email,
                    "nickname": data.nickname,
                    "password_hash": hash_password(data.password),
                    "provider": "local",
                },
            )
        except IntegrityError:
            # 동시 가입으로 조회 후 선점된 경우 — Taken between the lookup and the insert
            await db.rollback()
            raise DuplicateError("이미 가입된 이메일 또는 닉네임입니다")
        return self._to_response(user)

    async def check_nickname(
        self,
        db: AsyncSession,
        nickname: str,
    ) -> str:
        """닉네임 사용 가능 여부를 확인합니다.

        Raises DuplicateError when the nickname is taken, otherwise returns
        a confirmation message.
        """
        if await user_repository.nickname_taken(db, nickname):
            raise DuplicateError("이미 사용중인 닉네임입니다")
        return "사용 가능한 닉네임입니다"

    async def verify_user_and_sign_jwt(
        self,
        db: AsyncSession,
        email: str,
        password: str,
    ) -> LoginResponse:
        """이메일/비밀번호를 검증하고 JWT를 발급합니다.

        Verify credentials and sign an access token.

        Raises:
            UnauthorizedError: 잘못된 인증 정보일 때 (Unknown email or wrong password)
        """
        user: User | None = await user_repository.get_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthorizedError("이메일 또는 비밀번호를 확인해주세요")

        return LoginResponse(jwt=self._issue_token(user), nickname=user.nickname)

    async def _unique_nickname(self, db: AsyncSession, base: str) -> str:
        """중복되지 않는 닉네임을 생성합니다 — base, base_1234, ..."""
        base = base.strip()[:90] or "tgle"
        candidate = base
        for _ in range(10):
            if not await user_repository.nickname_taken(db, candidate):
                return candidate
            candidate = f"{base}_{secrets.randbelow(10000):04d}"
        return f"{base}_{secrets.token_hex(4)}"

    async def kakao_login(
        self,
        db: AsyncSession,
        code: str,
    ) -> SocialLoginResult:
        """카카오 인가 코드로 로그인 또는 회원가입을 처리합니다.

        Exchange the Kakao authorization code, then log in the matching
        social account or create one when this Kakao id is new.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            code: 카카오 인가 코드 (Authorization code from the callback)

        Returns:
            SocialLoginResult: JWT, 닉네임, "login" 또는 "signup"
        """
        access_token: str = await kakao_service.exchange_code(code)
        profile: KakaoProfile = await kakao_service.fetch_profile(access_token)

        user: User | None = await user_repository.get_by_sns_id(db, KAKAO_PROVIDER, profile.sns_id)
        if user is not None:
            return SocialLoginResult(jwt=self._issue_token(user), nickname=user.nickname, type="login")

        # 이메일 미제공 또는 로컬 계정과 충돌 시 카카오 전용 주소 사용
        email: str | None = profile.email
        if not email or await user_repository.get_by_email(db, email) is not None:
            email = f"kakao_{profile.sns_id}@kakao.tgle"

        try:
            user = await user_repository.create(
                db,
                {
                    "email": email,
                    "nickname": await self._unique_nickname(db, profile.nickname or "kakao"),
                    "password_hash": None,
                    "profile_img": profile.profile_img,
                    "provider": KAKAO_PROVIDER,
                    "sns_id": profile.sns_id,
                },
            )
        except IntegrityError:
            # 같은 카카오 계정의 동시 콜백 — the concurrent callback already created it
            await db.rollback()
            logger.info("Kakao sign-up conflict for sns_id=%s, retrying as login", profile.sns_id)
            user = await user_repository.get_by_sns_id(db, KAKAO_PROVIDER, profile.sns_id)
            if user is None:
                raise DuplicateError("이미 가입된 이메일 또는 닉네임입니다")
            return SocialLoginResult(jwt=self._issue_token(user), nickname=user.nickname, type="login")

        return SocialLoginResult(jwt=self._issue_token(user), nickname=user.nickname, type="signup")

    async def update_user_info(
        self,
        db: AsyncSession,
        user: User,
        data: UserUpdateRequest,
    ) -> None:
        """닉네임 및 비밀번호를 수정합니다.

        Update nickname and/or password of the current user.

        Raises:
            UnauthorizedError: 입력된 값이 없을 때 (No field provided)
            DuplicateError: 다른 사용자가 닉네임을 사용 중일 때 (Nickname taken)
            BadRequestError: 비밀번호 확인이 없거나 일치하지 않을 때 (Confirmation missing or mismatched)
        """
        if not data.nickname and not data.password and not data.confirm_password:
            raise UnauthorizedError("입력된 값이 없습니다")

        update_data: dict[str, str] = {}

        if data.nickname:
            if await user_repository.nickname_taken(db, data.nickname, exclude_user_id=user.id):
                raise DuplicateError("이미 사용중인 닉네임입니다")
            update_data["nickname"] = data.nickname

        if data.password or data.confirm_password:
            if not passwords_match(data.password, data.confirm_password):
                raise BadRequestError("비밀번호가 일치하지 않습니다")
            update_data["password_hash"] = hash_password(data.password)

        try:
            await user_repository.update(db, user, update_data)
        except IntegrityError:
            await db.rollback()
            raise DuplicateError("이미 사용중인 닉네임입니다")

    async def update_user_img(
        self,
        db: AsyncSession,
        user: User,
        filename: str,
        content_type: str,
        data: bytes,
    ) -> UserResponse:
        """프로필 이미지를 업로드하고 사용자 정보에 반영합니다.

        Upload a new profile image, store its URL and remove the previous
        image when it was uploaded by this server.

        Raises:
            BadRequestError: 이미지 파일이 아니거나 비어 있을 때 (Not an image, or empty)
        """
        if not content_type.startswith("image/"):
            raise BadRequestError("이미지 파일만 업로드할 수 있습니다")
        if not data:
            raise BadRequestError("빈 파일입니다")

        previous: str | None = user.profile_img
        url: str = await storage_service.upload_file(PROFILE_IMAGE_FOLDER, filename, content_type, data)
        user = await user_repository.update(db, user, {"profile_img": url})
        await storage_service.delete_file(previous)
        return self._to_response(user)


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
