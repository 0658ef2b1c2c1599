"""Integration tests for the dashboard endpoint."""

from httpx import AsyncClient


async def test_dashboard_empty(client: AsyncClient) -> None:
    """An empty portal reports zero counts."""
    response = await client.get("/api/dashboard")

    assert response.status_code == 200
    assert response.json() == {
        "stats": {
            "upcomingMeetings": 0,
            "pendingActions": 0,
            "activeMembers": 0,
            "totalDocuments": 0,
        },
        "upcomingMeetings": [],
        "pendingActions": [],
        "recentDocuments": [],
    }


async def test_dashboard_reflects_records(client: AsyncClient) -> None:
    """Counts and lists follow the stored records."""
    meeting = (
        await client.post(
            "/api/meetings",
            json={"title": "Q1 Board Meeting", "date": "2025-03-14", "time": "10:00"},
        )
    ).json()
    await client.post(
        "/api/members", json={"name": "Jane", "role": "Director", "email": "j@x.com"}
    )
    await client.post(
        "/api/action-items", json={"title": "Circulate budget", "dueDate": "2025-04-01"}
    )

    data = (await client.get("/api/dashboard")).json()

    assert data["stats"]["upcomingMeetings"] == 1
    assert data["stats"]["pendingActions"] == 1
    assert data["stats"]["activeMembers"] == 1
    assert data["upcomingMeetings"] == [meeting]
    assert data["pendingActions"][0]["dueDate"] == "2025-04-01"
