"""
Unit tests for community report and cleanup event endpoints.

Tests cover:
- Filing and listing reports, status lifecycle
- Organizing, listing and joining cleanup events
- Idempotent joins and full events
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCommunityReports:
    async def test_create_and_list(self, client: AsyncClient, auth_headers, seeded):
        response = await client.post(
            "/api/community-reports",
            headers=auth_headers,
            json={
                "reportType": "illegal_dumping",
                "description": "Mattress in the park",
                "location": "Central Park",
                "priority": "high",
            },
        )
        assert response.status_code == 201
        assert response.json()["priority"] == "high"
        assert response.json()["status"] == "reported"

        listed = await client.get("/api/community-reports", headers=auth_headers, params={"limit": 10})
        assert [r["reportType"] for r in listed.json()] == ["illegal_dumping"]

    async def test_resolve(self, client: AsyncClient, auth_headers, seeded):
        created = await client.post(
            "/api/community-reports",
            headers=auth_headers,
            json={"reportType": "overflowing_bin", "description": "Full", "location": "Main St"},
        )
        report_id = created.json()["id"]

        response = await client.patch(
            f"/api/community-reports/{report_id}/status", headers=auth_headers, json={"status": "resolved"}
        )

        assert response.json()["status"] == "resolved"
        assert response.json()["resolvedAt"] is not None

    async def test_unknown_report(self, client: AsyncClient, auth_headers, seeded):
        response = await client.patch(
            "/api/community-reports/999/status", headers=auth_headers, json={"status": "investigating"}
        )
        assert response.status_code == 404


class TestCleanupEvents:
    async def test_list_upcoming(self, client: AsyncClient, auth_headers, seeded):
        response = await client.get("/api/cleanup-events", headers=auth_headers)

        events = response.json()
        assert [e["id"] for e in events] == [seeded["event_id"]]
        assert events[0]["currentParticipants"] == 0
        assert events[0]["maxParticipants"] == 1

    async def test_create_sets_organizer(self, client: AsyncClient, auth_headers, seeded):
        response = await client.post(
            "/api/cleanup-events",
            headers=auth_headers,
            json={"title": "River Sweep", "location": "River Walk", "eventDate": "2099-05-01T08:00:00Z"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["organizerId"] == "user-1"
        assert data["duration"] == 120
        assert data["maxParticipants"] is None

    async def test_join_twice(self, client: AsyncClient, auth_headers, seeded):
        path = f"/api/cleanup-events/{seeded['event_id']}/join"

        first = await client.post(path, headers=auth_headers)
        second = await client.post(path, headers=auth_headers)

        assert first.json()["joined"] is True
        assert second.status_code == 200
        assert second.json()["joined"] is False
        events = await client.get("/api/cleanup-events", headers=auth_headers)
        assert events.json()[0]["currentParticipants"] == 1

    async def test_join_full_event(self, client: AsyncClient, auth_headers, seeded):
        path = f"/api/cleanup-events/{seeded['event_id']}/join"
        await client.put("/api/auth/user", headers={"X-User-Id": "user-2"}, json={})

        await client.post(path, headers=auth_headers)
        response = await client.post(path, headers={"X-User-Id": "user-2"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Cleanup event is full"}

    async def test_join_unknown_event(self, client: AsyncClient, auth_headers, seeded):
        response = await client.post("/api/cleanup-events/999/join", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"detail": "Cleanup event not found"}

    async def test_join_without_profile_conflicts(self, client: AsyncClient, seeded):
        headers = {"X-User-Id": "no-profile"}

        response = await client.post(f"/api/cleanup-events/{seeded['event_id']}/join", headers=headers)

        assert response.status_code == 409
        events = await client.get("/api/cleanup-events", headers=headers)
        assert events.json()[0]["currentParticipants"] == 0
