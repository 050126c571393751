"""Integration tests for audit log endpoints."""

import pytest
from httpx import AsyncClient

API = "/api/v1"


class TestActivityLog:
    @pytest.mark.asyncio
    async def test_changes_are_attributed_to_actor_header(self, client: AsyncClient) -> None:
        await client.post(
            f"{API}/members",
            json={"first_name": "Max", "last_name": "Mustermann"},
            headers={"X-Actor": "julia@example.com"},
        )

        response = await client.get(f"{API}/activity")

        body = response.json()
        assert body["meta"]["total"] == 1
        entry = body["data"][0]
        assert entry["actor"] == "julia@example.com"
        assert entry["action"] == "member.created"
        assert entry["details"] == "Created member Max Mustermann"

    @pytest.mark.asyncio
    async def test_missing_actor_falls_back_to_system(self, client: AsyncClient) -> None:
        await client.post(f"{API}/attributes", json={"name": "Notes"})

        response = await client.get(f"{API}/activity")

        assert response.json()["data"][0]["actor"] == "System"

    @pytest.mark.asyncio
    async def test_newest_first_with_pagination(self, client: AsyncClient) -> None:
        for name in ("A", "B", "C"):
            await client.post(f"{API}/attributes", json={"name": name})

        response = await client.get(f"{API}/activity", params={"limit": 2, "offset": 0})

        body = response.json()
        assert [e["details"] for e in body["data"]] == [
            "Created attribute C",
            "Created attribute B",
        ]
        assert body["meta"]["total"] == 3

    @pytest.mark.asyncio
    async def test_record_session_entry(self, client: AsyncClient) -> None:
        response = await client.post(
            f"{API}/activity",
            json={"action": "session.login", "details": "Signed in"},
            headers={"X-Actor": "tim@example.com"},
        )

        assert response.status_code == 201
        assert response.json()["actor"] == "tim@example.com"

        log = (await client.get(f"{API}/activity")).json()["data"]
        assert log[0]["action"] == "session.login"

    @pytest.mark.asyncio
    async def test_assign_and_unassign_are_not_logged(self, client: AsyncClient) -> None:
        member = (
            await client.post(f"{API}/members", json={"first_name": "Max", "last_name": "M"})
        ).json()["data"]
        event = (
            await client.post(
                f"{API}/events",
                json={
                    "name": "Training",
                    "start": "2030-06-03T09:00:00Z",
                    "end": "2030-06-03T10:00:00Z",
                },
            )
        ).json()["data"]
        group_id = event["groups"][0]["id"]

        slot = f"{API}/events/{event['id']}/groups/{group_id}/members/{member['id']}"
        await client.put(slot)
        await client.delete(slot)

        actions = [e["action"] for e in (await client.get(f"{API}/activity")).json()["data"]]
        assert actions == ["event.created", "member.created"]
