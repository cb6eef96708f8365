"""레포지토리 패키지 — 사용자, 공연, 아티스트 테이블 쿼리 계층.

Repository package — Query layer for the users, concerts and artists tables.
Each module exposes a singleton built on BaseRepository (int primary keys)
plus the lookups its service needs: email/nickname/sns_id for users,
paged listing for concerts, like counts for artists.
"""
