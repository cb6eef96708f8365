"""공연 및 카테고리 API 테스트.

Concert and Category API tests — Public listing/detail, admin-only
create/update/delete, pagination and category filtering.
"""

from datetime import datetime, timezone

from httpx import AsyncClient

from app.models.concert import Concert
from tests.conftest import auth_header

URL = "/concerts"
CATEGORY_URL = "/categories"


def _concert_payload(category_id: int, **overrides) -> dict:
    payload = {
        "categoryId": category_id,
        "concertName": "겨울 콘서트",
        "concertImg": "https://cdn.tgle.ml/poster.jpg",
        "concertInfo": "연말 공연",
        "concertDate": "2026-12-24T19:00:00Z",
        "ticketingDate": "2026-11-01T20:00:00Z",
        "ticketingUrl": "https://tickets.example.com/1",
        "calender": "2026.12.24 ~ 2026.12.25",
        "playTime": "120분",
        "locationName": "KSPO DOME",
        "ratings": "8세 이상",
    }
    payload.update(overrides)
    return payload


class TestConcertCreate:
    """공연 생성 테스트."""

    async def test_create_concert(self, client: AsyncClient, admin_token, category):
        res = await client.post(URL, json=_concert_payload(category.id), headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["concertName"] == "겨울 콘서트"
        assert data["categoryId"] == category.id
        assert data["playTime"] == "120분"
        assert data["locationName"] == "KSPO DOME"

    async def test_create_concert_regular_user_forbidden(self, client: AsyncClient, user_token, category):
        res = await client.post(URL, json=_concert_payload(category.id), headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_create_concert_unauthenticated(self, client: AsyncClient, category):
        res = await client.post(URL, json=_concert_payload(category.id))
        assert res.status_code == 401

    async def test_create_concert_unknown_category(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json=_concert_payload(9999), headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_create_concert_missing_name(self, client: AsyncClient, admin_token, category):
        payload = _concert_payload(category.id)
        del payload["concertName"]
        res = await client.post(URL, json=payload, headers=auth_header(admin_token))
        assert res.status_code == 422


class TestConcertRead:
    """공연 조회 테스트."""

    async def test_get_concert(self, client: AsyncClient, concert):
        res = await client.get(f"{URL}/{concert.id}")
        assert res.status_code == 200
        assert res.json()["concertName"] == concert.concert_name

    async def test_get_concert_not_found(self, client: AsyncClient):
        res = await client.get(f"{URL}/9999")
        assert res.status_code == 404

    async def test_list_concerts_newest_first(self, client: AsyncClient, db, category):
        for day in (1, 15, 8):
            db.add(Concert(
                category_id=category.id,
                concert_name=f"day-{day}",
                concert_date=datetime(2026, 12, day, tzinfo=timezone.utc),
            ))
        await db.flush()

        res = await client.get(URL)
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        assert [c["concertName"] for c in data["items"]] == ["day-15", "day-8", "day-1"]

    async def test_list_concerts_pagination(self, client: AsyncClient, db, category):
        for i in range(5):
            db.add(Concert(
                category_id=category.id,
                concert_name=f"c{i}",
                concert_date=datetime(2026, 12, i + 1, tzinfo=timezone.utc),
            ))
        await db.flush()

        res = await client.get(URL, params={"page": 2, "per_page": 2})
        data = res.json()
        assert data["total"] == 5
        assert data["page"] == 2
        assert data["pages"] == 3
        assert len(data["items"]) == 2

    async def test_list_concerts_by_category(self, client: AsyncClient, db, concert):
        from app.models.concert import Category
        other = Category(name="힙합")
        db.add(other)
        await db.flush()
        db.add(Concert(
            category_id=other.id,
            concert_name="힙합 페스티벌",
            concert_date=datetime(2026, 10, 1, tzinfo=timezone.utc),
        ))
        await db.flush()

        res = await client.get(URL, params={"category_id": other.id})
        names = [c["concertName"] for c in res.json()["items"]]
        assert names == ["힙합 페스티벌"]


class TestConcertUpdateDelete:
    """공연 수정/삭제 테스트."""

    async def test_update_concert_partial(self, client: AsyncClient, admin_token, concert):
        res = await client.put(
            f"{URL}/{concert.id}",
            json={"ratings": "15세 이상"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["ratings"] == "15세 이상"
        assert data["concertName"] == concert.concert_name

    async def test_update_concert_null_required(self, client: AsyncClient, admin_token, concert):
        res = await client.put(
            f"{URL}/{concert.id}",
            json={"concertDate": None},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 400

    async def test_update_concert_forbidden(self, client: AsyncClient, user_token, concert):
        res = await client.put(f"{URL}/{concert.id}", json={"ratings": "x"}, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_delete_concert(self, client: AsyncClient, admin_token, concert):
        res = await client.delete(f"{URL}/{concert.id}", headers=auth_header(admin_token))
        assert res.status_code == 200

        res = await client.get(f"{URL}/{concert.id}")
        assert res.status_code == 404

    async def test_delete_concert_not_found(self, client: AsyncClient, admin_token):
        res = await client.delete(f"{URL}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404


class TestCategories:
    """카테고리 테스트."""

    async def test_list_categories(self, client: AsyncClient, category):
        res = await client.get(CATEGORY_URL)
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["발라드"]

    async def test_create_category(self, client: AsyncClient, admin_token):
        res = await client.post(CATEGORY_URL, json={"name": "인디"}, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["name"] == "인디"

    async def test_create_category_duplicate(self, client: AsyncClient, admin_token, category):
        res = await client.post(CATEGORY_URL, json={"name": category.name}, headers=auth_header(admin_token))
        assert res.status_code == 409

    async def test_create_category_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(CATEGORY_URL, json={"name": "록"}, headers=auth_header(user_token))
        assert res.status_code == 403
