"""
Unit tests for waste entry endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCreateWasteEntry:
    async def test_create_credits_points(self, client: AsyncClient, auth_headers, seeded):
        response = await client.post(
            "/api/waste-entries",
            headers=auth_headers,
            json={"wasteType": "plastic", "quantity": 2.5, "disposalMethod": "recycling", "ecoPointsEarned": 25},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["wasteType"] == "plastic"
        assert data["unit"] == "kg"
        assert data["userId"] == "user-1"
        assert "id" in data

        user = await client.get("/api/auth/user", headers=auth_headers)
        assert user.json()["ecoPoints"] == 125

    async def test_create_for_unknown_user(self, client: AsyncClient):
        response = await client.post(
            "/api/waste-entries", headers={"X-User-Id": "ghost"}, json={"wasteType": "glass", "quantity": 1}
        )
        assert response.status_code == 404

    async def test_validation(self, client: AsyncClient, auth_headers, seeded):
        response = await client.post("/api/waste-entries", headers=auth_headers, json={"quantity": -1})
        assert response.status_code == 422


class TestListWasteEntries:
    async def test_list_and_date_filter(self, client: AsyncClient, auth_headers, seeded):
        for waste_type in ("plastic", "glass"):
            await client.post(
                "/api/waste-entries", headers=auth_headers, json={"wasteType": waste_type, "quantity": 1}
            )

        all_entries = await client.get("/api/waste-entries", headers=auth_headers)
        assert len(all_entries.json()) == 2

        none_in_range = await client.get(
            "/api/waste-entries",
            headers=auth_headers,
            params={"startDate": "2000-01-01T00:00:00Z", "endDate": "2000-12-31T00:00:00Z"},
        )
        assert none_in_range.json() == []

        open_ended = await client.get(
            "/api/waste-entries", headers=auth_headers, params={"startDate": "2000-01-01T00:00:00+02:00"}
        )
        assert len(open_ended.json()) == 2
