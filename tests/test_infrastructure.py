"""로깅 마스킹 및 스토리지 키 테스트.

Unit tests for request-log masking, storage key handling and password
utilities.
"""

import re

from app.middleware.axiom_logging import _mask_dict
from app.services.storage_service import storage_service
from app.utils.password import (
    BCRYPT_MAX_BYTES,
    hash_password,
    password_fits,
    passwords_match,
    verify_password,
)


class TestLogMasking:
    """요청 로그 민감 필드 마스킹."""

    def test_masks_credentials(self):
        masked = _mask_dict({
            "email": "fan@tgle.ml",
            "password": "fan12345",
            "confirmPassword": "fan12345",
            "jwt": "abc.def.ghi",
        })
        assert masked == {
            "email": "fan@tgle.ml",
            "password": "***",
            "confirmPassword": "***",
            "jwt": "***",
        }

    def test_masks_nested_and_oauth_code(self):
        masked = _mask_dict({"profile": {"nickname": "fan", "accessToken": "t"}, "code": "kakao-code"})
        assert masked == {"profile": {"nickname": "fan", "accessToken": "***"}, "code": "***"}

    def test_truncates_long_strings(self):
        masked = _mask_dict({"concertInfo": "x" * 5000})
        assert masked["concertInfo"].endswith("...(truncated)")
        assert len(masked["concertInfo"]) < 2100


class TestStorageKeys:
    """업로드 키 생성 및 URL 역변환."""

    def test_generate_key_layout(self):
        key = storage_service._generate_key("Profile.JPG", "users")
        assert re.fullmatch(r"users/\d{4}/\d{2}/\d{2}/[0-9a-f]{32}\.jpg", key)

    def test_generate_key_without_extension(self):
        assert storage_service._generate_key("blob", "users").endswith(".bin")

    def test_extract_key_from_own_url(self):
        url = f"{storage_service._base_url}users/2026/10/19/abc.png"
        assert storage_service._extract_key(url) == "users/2026/10/19/abc.png"

    def test_extract_key_ignores_foreign_url(self):
        assert storage_service._extract_key("http://k.kakaocdn.net/img.jpg") is None

    async def test_delete_foreign_url_is_noop(self):
        assert await storage_service.delete_file("http://k.kakaocdn.net/img.jpg") is False
        assert await storage_service.delete_file(None) is False


class TestPasswordUtils:
    """비밀번호 유틸리티 — 멀티바이트 및 bcrypt 한도."""

    def test_passwords_match_non_ascii(self):
        assert passwords_match("비밀번호1234", "비밀번호1234") is True
        assert passwords_match("비밀번호1234", "비밀번호5678") is False

    def test_passwords_match_requires_both(self):
        assert passwords_match("secret", None) is False
        assert passwords_match(None, "secret") is False

    def test_password_fits_counts_bytes(self):
        assert password_fits("a" * BCRYPT_MAX_BYTES) is True
        assert password_fits("a" * (BCRYPT_MAX_BYTES + 1)) is False
        # 한글 한 글자는 3바이트
        assert password_fits("가" * 24) is True
        assert password_fits("가" * 25) is False

    def test_verify_rejects_input_over_limit(self):
        hashed = hash_password("a" * BCRYPT_MAX_BYTES)
        assert verify_password("a" * BCRYPT_MAX_BYTES, hashed) is True
        assert verify_password("a" * 80, hashed) is False

    def test_verify_without_hash(self):
        assert verify_password("anything", None) is False
