"""Integration tests for the /api/v1/holidays endpoints."""


class TestCreateHoliday:
    async def test_create(self, client, team):
        alice = team["Alice"]
        resp = await client.post("/api/v1/holidays/", json={
            "team_member_id": alice["id"],
            "holiday_date": "2024-12-25",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["team_member_id"] == alice["id"]
        assert data["holiday_date"] == "2024-12-25"

    async def test_unknown_member(self, client):
        resp = await client.post("/api/v1/holidays/", json={
            "team_member_id": 99999,
            "holiday_date": "2024-12-25",
        })
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Team member with ID 99999 not found"

    async def test_datetime_rejected(self, client, team):
        resp = await client.post("/api/v1/holidays/", json={
            "team_member_id": team["Alice"]["id"],
            "holiday_date": "2024-12-25T10:00:00Z",
        })
        assert resp.status_code == 422

    async def test_impossible_date(self, client, team):
        resp = await client.post("/api/v1/holidays/", json={
            "team_member_id": team["Alice"]["id"],
            "holiday_date": "2023-02-29",
        })
        assert resp.status_code == 422
        assert "holiday_date" in resp.json()["detail"]


class TestListHolidays:
    async def test_lists_with_team_member(self, client, team):
        bob = team["Bob"]
        await client.post("/api/v1/holidays/", json={
            "team_member_id": bob["id"], "holiday_date": "2024-01-03",
        })

        resp = await client.get("/api/v1/holidays/")

        assert resp.status_code == 200
        holidays = resp.json()
        assert len(holidays) == 1
        assert holidays[0]["team_member"]["name"] == "Bob"

    async def test_date_filter(self, client, team):
        alice_id = team["Alice"]["id"]
        for day in ("2024-01-01", "2024-02-01"):
            await client.post("/api/v1/holidays/", json={
                "team_member_id": alice_id, "holiday_date": day,
            })

        resp = await client.get(
            "/api/v1/holidays/", params={"date_from": "2024-01-15", "date_to": "2024-02-01"},
        )

        assert resp.status_code == 200
        assert [h["holiday_date"] for h in resp.json()] == ["2024-02-01"]

    async def test_bad_filter(self, client):
        resp = await client.get("/api/v1/holidays/", params={"date_from": "yesterday"})
        assert resp.status_code == 422
