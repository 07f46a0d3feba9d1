# 📄 File: tests/test_api_misc.py
# 🧭 Purpose (Layman Explanation):
# Checks the things around the garden features: health checks, logging in, keeping each
# gardener's records private, and walkways and gates.
#
# 🧪 Purpose (Technical Summary):
# API tests for /health, token handling (401 envelope), owner scoping (foreign ids look
# exactly like missing ids), and the walkway / gate endpoints.

import pytest


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["status"] == "healthy"

    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200


class TestAuthentication:
    async def test_missing_token(self, client):
        response = await client.get("/api/v1/beds")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_invalid_token(self, client):
        response = await client.get("/api/v1/beds", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    async def test_access_token_header(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ", 1)[1]
        response = await client.get("/api/v1/beds", headers={"X-Access-Token": token})
        assert response.status_code == 200


class TestOwnership:
    async def test_foreign_bed_looks_missing(self, client, api, other_api, other_user_headers):
        bed = await api.bed("Mine")

        foreign = await client.get(f"/api/v1/beds/{bed['id']}", headers=other_user_headers)
        missing = await client.get("/api/v1/beds/999999", headers=other_user_headers)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json()["error"]["code"] == missing.json()["error"]["code"] == "NOT_FOUND"
        assert foreign.json()["error"]["message"] == missing.json()["error"]["message"]

    async def test_foreign_plant_cannot_be_placed(self, api, other_api):
        bed = await other_api.bed("Theirs")
        plant = await api.plant("Mine")

        response = await other_api.place(bed["id"], plant["id"], 0, 0)

        assert response.status_code == 404

    async def test_other_owner_beds_never_overlap(self, api, other_api):
        await api.garden()
        await other_api.garden()
        mine = await api.bed("Mine")
        theirs = await other_api.bed("Theirs")
        await api.position(mine["id"], 0, 0)

        assert (await other_api.position(theirs["id"], 0, 0)).status_code == 200

    async def test_lists_are_scoped(self, client, api, other_user_headers):
        await api.bed("Mine")
        assert (await client.get("/api/v1/beds", headers=other_user_headers)).json() == []


class TestWalkwaysAndGates:
    async def test_walkway_crud(self, client, api, auth_headers):
        await api.garden()

        created = await client.post(
            "/api/v1/walkways",
            json={"x": 0, "y": 9, "width": 10, "height": 1, "name": "Main path"},
            headers=auth_headers,
        )
        assert created.status_code == 201
        walkway = created.json()

        moved = await client.patch(f"/api/v1/walkways/{walkway['id']}", json={"y": 8}, headers=auth_headers)
        assert moved.json()["y"] == 8

        listed = (await client.get("/api/v1/walkways", headers=auth_headers)).json()
        assert [w["name"] for w in listed] == ["Main path"]

        deleted = await client.delete(f"/api/v1/walkways/{walkway['id']}", headers=auth_headers)
        assert deleted.json() == {"ok": True}

    async def test_walkway_outside_garden(self, client, api, auth_headers):
        await api.garden()
        response = await client.post(
            "/api/v1/walkways", json={"x": 8, "y": 0, "width": 4}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "OUT_OF_BOUNDS"

    @pytest.mark.parametrize("side,expected", [(None, "bottom"), ("left", "left")])
    async def test_gate_side(self, client, auth_headers, side, expected):
        payload = {"x": 0, "y": 0}
        if side is not None:
            payload["side"] = side

        response = await client.post("/api/v1/gates", json=payload, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["side"] == expected

    async def test_gate_bad_side(self, client, auth_headers):
        response = await client.post("/api/v1/gates", json={"x": 0, "y": 0, "side": "north"}, headers=auth_headers)
        assert response.status_code == 422

    async def test_missing_gate_delete(self, client, auth_headers):
        response = await client.delete("/api/v1/gates/424242", headers=auth_headers)
        assert response.status_code == 404
