"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Local accounts store a bcrypt hash; social (Kakao) accounts have no
password hash and are rejected before verify_password is reached.
bcrypt only accepts up to 72 bytes of input, so request schemas cap
passwords at BCRYPT_MAX_BYTES (UTF-8) and verify_password treats longer
input as a mismatch.
"""

import secrets

import bcrypt

# bcrypt 입력 한도 — bcrypt input limit in bytes
BCRYPT_MAX_BYTES: int = 72


def password_fits(password: str) -> bool:
    """UTF-8 인코딩 길이가 bcrypt 한도 이내인지 확인합니다."""
    return len(password.encode("utf-8")) <= BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password with a fresh random salt.

    Args:
        password: 평문 비밀번호, 72바이트 이하 (Plain text password, at most 72 bytes)

    Returns:
        str: bcrypt 해시 문자열 (e.g. "$2b$12$LJ3m4ys3...")
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a stored bcrypt hash.
    Returns False when the account has no password (social login only)
    or when the input exceeds the bcrypt limit, since no stored hash can
    have been produced from it.
    """
    if not hashed_password or not password_fits(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


def passwords_match(password: str | None, confirm_password: str | None) -> bool:
    """비밀번호와 비밀번호 확인 값이 모두 있고 일치하는지 확인합니다."""
    if not password or not confirm_password:
        return False
    return secrets.compare_digest(password.encode("utf-8"), confirm_password.encode("utf-8"))
