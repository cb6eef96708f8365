"""서비스 패키지 — 회원, 공연, 아티스트 비즈니스 로직.

Service package — Business rules for accounts (local and Kakao), concerts
and artist likes. Services only flush; routers own the commit. Storage and
Kakao services wrap the external S3 and Kakao OAuth calls.
"""
