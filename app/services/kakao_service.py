"""카카오 OAuth 클라이언트 — 인가 코드 교환 및 사용자 정보 조회.

Kakao OAuth client — Builds the authorize URL, exchanges the
authorization code for an access token and fetches the Kakao profile.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from app.config import settings
from app.utils.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoProfile(BaseModel):
    """카카오 사용자 프로필 — Subset of /v2/user/me used for sign-up."""

    sns_id: str
    email: str | None = None
    nickname: str | None = None
    profile_img: str | None = None


class KakaoService:
    """카카오 로그인 API 호출을 담당하는 서비스."""

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def build_authorize_url(self) -> str:
        """카카오 인가 페이지 URL을 생성합니다 (Kakao authorize URL with code flow)."""
        url = httpx.URL(KAKAO_AUTH_URL).copy_merge_params(
            {
                "client_id": settings.KAKAO_CLIENT_ID,
                "redirect_uri": settings.KAKAO_REDIRECT_URI,
                "response_type": "code",
            }
        )
        return str(url)

    async def exchange_code(self, code: str) -> str:
        """인가 코드를 카카오 액세스 토큰으로 교환합니다.

        Exchange an authorization code for a Kakao access token.

        Raises:
            UnauthorizedError: 카카오가 코드를 거부했거나 통신 실패 시
        """
        data: dict[str, str] = {
            "grant_type": "authorization_code",
            "client_id": settings.KAKAO_CLIENT_ID,
            "redirect_uri": settings.KAKAO_REDIRECT_URI,
            "code": code,
        }
        if settings.KAKAO_CLIENT_SECRET:
            data["client_secret"] = settings.KAKAO_CLIENT_SECRET

        payload = await self._request("POST", KAKAO_TOKEN_URL, data=data)
        access_token = payload.get("access_token")
        if not access_token:
            raise UnauthorizedError("Kakao login failed")
        return str(access_token)

    async def fetch_profile(self, access_token: str) -> KakaoProfile:
        """카카오 액세스 토큰으로 사용자 정보를 조회합니다."""
        payload = await self._request(
            "GET",
            KAKAO_PROFILE_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if "id" not in payload:
            raise UnauthorizedError("Kakao login failed")

        account: dict[str, Any] = payload.get("kakao_account") or {}
        profile: dict[str, Any] = account.get("profile") or {}
        properties: dict[str, Any] = payload.get("properties") or {}
        return KakaoProfile(
            sns_id=str(payload["id"]),
            email=account.get("email"),
            nickname=profile.get("nickname") or properties.get("nickname"),
            profile_img=profile.get("profile_image_url") or properties.get("profile_image"),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Kakao API %s %s returned %s: %s",
                method, url, exc.response.status_code, exc.response.text[:300],
            )
            raise UnauthorizedError("Kakao login failed") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Kakao API %s %s failed: %s", method, url, exc)
            raise UnauthorizedError("Kakao login failed") from exc


kakao_service: KakaoService = KakaoService()
