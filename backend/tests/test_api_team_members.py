"""Integration tests for the /api/v1/team-members endpoints."""


class TestCreateTeamMember:
    async def test_create(self, client):
        resp = await client.post("/api/v1/team-members/", json={"name": "Alice"})
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == "Alice"
        assert isinstance(data["id"], int)
        assert data["created_at"]

    async def test_blank_name(self, client):
        resp = await client.post("/api/v1/team-members/", json={"name": "   "})
        assert resp.status_code == 422
        assert resp.json()["detail"] == "Name is required"

    async def test_missing_name(self, client):
        resp = await client.post("/api/v1/team-members/", json={})
        assert resp.status_code == 422


class TestListTeamMembers:
    async def test_empty(self, client):
        resp = await client.get("/api/v1/team-members/")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_lists_created_members(self, client, team):
        resp = await client.get("/api/v1/team-members/")
        assert resp.status_code == 200
        assert [m["name"] for m in resp.json()] == ["Alice", "Bob"]
