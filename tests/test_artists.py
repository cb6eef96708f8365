"""아티스트 및 좋아요 API 테스트.

Artist and ArtistLike API tests — Listing with like counts, admin-only
creation, the like toggle, and the "liked by me" list.
"""

from unittest.mock import patch

from httpx import AsyncClient
from sqlalchemy import select

from app.models.artist import Artist, ArtistLike
from app.repositories.artist_repository import artist_like_repository
from tests.conftest import auth_header, make_token

URL = "/artists"


class TestArtistCrud:
    """아티스트 조회/생성 테스트."""

    async def test_create_artist(self, client: AsyncClient, admin_token, category):
        res = await client.post(URL, json={
            "artistName": "성시경",
            "categoryId": category.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["artistName"] == "성시경"
        assert data["likeCount"] == 0

    async def test_create_artist_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(URL, json={"artistName": "x"}, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_create_artist_unknown_category(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json={"artistName": "x", "categoryId": 9999}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_get_artist(self, client: AsyncClient, artist):
        res = await client.get(f"{URL}/{artist.id}")
        assert res.status_code == 200
        assert res.json()["artistName"] == artist.artist_name

    async def test_get_artist_not_found(self, client: AsyncClient):
        res = await client.get(f"{URL}/9999")
        assert res.status_code == 404

    async def test_list_artists_with_like_counts(self, client: AsyncClient, db, artist, user, other_user):
        quiet = Artist(artist_name="가수B")
        db.add(quiet)
        db.add(ArtistLike(user_id=user.id, artist_id=artist.id, is_like=True))
        db.add(ArtistLike(user_id=other_user.id, artist_id=artist.id, is_like=False))
        await db.flush()

        res = await client.get(URL)
        assert res.status_code == 200
        counts = {a["artistName"]: a["likeCount"] for a in res.json()}
        assert counts == {"아이유": 1, "가수B": 0}


class TestArtistLike:
    """좋아요 토글 테스트."""

    async def test_first_like_creates_row(self, client: AsyncClient, db, user, user_token, artist):
        res = await client.post(f"{URL}/{artist.id}/like", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json() == {"artistId": artist.id, "isLike": True, "likeCount": 1}

        rows = (await db.execute(select(ArtistLike).where(ArtistLike.user_id == user.id))).scalars().all()
        assert len(rows) == 1

    async def test_toggle_twice_unlikes(self, client: AsyncClient, db, user, user_token, artist):
        await client.post(f"{URL}/{artist.id}/like", headers=auth_header(user_token))
        res = await client.post(f"{URL}/{artist.id}/like", headers=auth_header(user_token))
        assert res.json()["isLike"] is False
        assert res.json()["likeCount"] == 0

        rows = (await db.execute(select(ArtistLike).where(ArtistLike.user_id == user.id))).scalars().all()
        assert len(rows) == 1
        assert rows[0].is_like is False

    async def test_likes_from_two_users(self, client: AsyncClient, user_token, other_user, artist):
        await client.post(f"{URL}/{artist.id}/like", headers=auth_header(user_token))
        res = await client.post(f"{URL}/{artist.id}/like", headers=auth_header(make_token(other_user)))
        assert res.json()["likeCount"] == 2

    async def test_like_unknown_artist(self, client: AsyncClient, user_token):
        res = await client.post(f"{URL}/9999/like", headers=auth_header(user_token))
        assert res.status_code == 404

    async def test_like_requires_auth(self, client: AsyncClient, artist):
        res = await client.post(f"{URL}/{artist.id}/like")
        assert res.status_code == 401

    async def test_liked_list(self, client: AsyncClient, db, user, user_token, artist):
        other = Artist(artist_name="가수C")
        db.add(other)
        await db.flush()

        await client.post(f"{URL}/{artist.id}/like", headers=auth_header(user_token))
        await client.post(f"{URL}/{other.id}/like", headers=auth_header(user_token))
        await client.post(f"{URL}/{other.id}/like", headers=auth_header(user_token))

        res = await client.get(f"{URL}/liked", headers=auth_header(user_token))
        assert res.status_code == 200
        assert [a["artistName"] for a in res.json()] == ["아이유"]

    async def test_liked_list_requires_auth(self, client: AsyncClient):
        res = await client.get(f"{URL}/liked")
        assert res.status_code == 401

    async def test_like_row_created_concurrently(self, client: AsyncClient, db, user, user_token, artist):
        """조회 이후 같은 좋아요 행이 먼저 생성되면 그 행을 토글합니다."""
        user_id, artist_id = user.id, artist.id
        db.add(ArtistLike(user_id=user_id, artist_id=artist_id, is_like=True))
        await db.commit()

        real_lookup = artist_like_repository.get_for_user
        lookups: list[int] = []

        async def miss_first(session, uid, aid):
            lookups.append(aid)
            if len(lookups) == 1:
                return None
            return await real_lookup(session, uid, aid)

        with patch.object(artist_like_repository, "get_for_user", miss_first):
            res = await client.post(f"{URL}/{artist_id}/like", headers=auth_header(user_token))

        assert res.status_code == 200
        assert res.json() == {"artistId": artist_id, "isLike": False, "likeCount": 0}
        rows = (await db.execute(select(ArtistLike).where(ArtistLike.user_id == user_id))).scalars().all()
        assert len(rows) == 1
