# 📄 File: tests/test_api_layout.py
# 🧭 Purpose (Layman Explanation):
# Checks the garden grid through the web API: setting the garden size, dropping beds on it,
# and refusing beds that fall off the edge or land on top of each other.
#
# 🧪 Purpose (Technical Summary):
# API tests for PUT/GET /garden, /garden/layout and POST /beds/{id}/position, including
# the error envelope for OUT_OF_BOUNDS, OVERLAP, CONFIGURATION_ERROR and VALIDATION_ERROR.

import pytest


class TestGardenSetup:
    async def test_upsert_garden_derives_grid(self, api):
        garden = await api.garden(width=120, height=96, cell=12)
        assert (garden["cols"], garden["rows"]) == (10, 8)

        resized = await api.garden(width=120, height=120, cell=6)
        assert resized["id"] == garden["id"]
        assert (resized["cols"], resized["rows"]) == (20, 20)

    async def test_unsupported_cell_size_rejected(self, client, auth_headers):
        response = await client.put(
            "/api/v1/garden",
            json={"widthInches": 120, "heightInches": 120, "cellInches": 10},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_garden_is_null_before_setup(self, client, auth_headers):
        response = await client.get("/api/v1/garden", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() is None


class TestBedPositioning:
    async def test_adjacent_beds_then_overlap(self, api):
        await api.garden()
        bed_a = await api.bed("A")
        bed_b = await api.bed("B")

        response = await api.position(bed_a["id"], 0, 0)
        assert response.status_code == 200
        assert (response.json()["gardenX"], response.json()["gardenY"]) == (0, 0)

        assert (await api.position(bed_b["id"], 4, 0)).status_code == 200

        response = await api.position(bed_b["id"], 3, 0)
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "OVERLAP"
        assert error["message"] == 'Overlaps with "A".'
        assert response.headers["X-Error-Code"] == "OVERLAP"

    async def test_layout_reports_footprints(self, client, api, auth_headers):
        await api.garden()
        bed_a = await api.bed("A")
        await api.bed("Loose")
        await api.position(bed_a["id"], 0, 0)

        layout = (await client.get("/api/v1/garden/layout", headers=auth_headers)).json()

        assert layout["garden"]["cols"] == 10
        placed = layout["placedBeds"]
        assert [(b["name"], b["footprintW"], b["footprintH"]) for b in placed] == [("A", 4, 8)]
        assert [b["name"] for b in layout["unplacedBeds"]] == ["Loose"]

    async def test_out_of_bounds(self, api):
        await api.garden()
        bed = await api.bed("Wide", width=48, height=48)

        response = await api.position(bed["id"], 7, 0)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "OUT_OF_BOUNDS"

    @pytest.mark.parametrize("origin,expected", [((1, 1), 409), ((2, 2), 200)])
    async def test_two_by_two_against_three_by_three(self, api, origin, expected):
        await api.garden()
        small = await api.bed("Small", width=24, height=24)
        large = await api.bed("Large", width=36, height=36)
        await api.position(small["id"], 0, 0)

        response = await api.position(large["id"], *origin)

        assert response.status_code == expected

    async def test_repositioning_excludes_itself(self, api):
        await api.garden()
        bed = await api.bed("A")
        await api.position(bed["id"], 0, 0)
        assert (await api.position(bed["id"], 1, 0)).status_code == 200

    async def test_position_without_garden(self, api):
        bed = await api.bed("A")

        response = await api.position(bed["id"], 0, 0)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "CONFIGURATION_ERROR"

    async def test_detach_with_null_needs_no_garden(self, api):
        bed = await api.bed("A")

        response = await api.position(bed["id"], None, None)

        assert response.status_code == 200
        assert response.json()["gardenX"] is None

    async def test_detached_bed_frees_its_cells(self, api):
        await api.garden()
        bed_a = await api.bed("A")
        bed_b = await api.bed("B")
        await api.position(bed_a["id"], 0, 0)
        await api.position(bed_a["id"], None, 0)

        assert (await api.position(bed_b["id"], 0, 0)).status_code == 200

    async def test_fractional_coordinate_rejected(self, api):
        await api.garden()
        bed = await api.bed("A")

        response = await api.position(bed["id"], 1.5, 0)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_missing_coordinate_key_rejected(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("A")

        response = await client.post(
            f"/api/v1/beds/{bed['id']}/position", json={"gardenY": 0}, headers=auth_headers
        )

        assert response.status_code == 422
        fields = [e["field"] for e in response.json()["error"]["details"]["errors"]]
        assert any("gardenX" in f for f in fields)


class TestRotation:
    async def test_rotation_swaps_footprint(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("A", width=48, height=96)
        await api.position(bed["id"], 0, 0)

        response = await client.patch(
            f"/api/v1/beds/{bed['id']}", json={"gardenRotated": True}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["gardenRotated"] is True

        layout = (await client.get("/api/v1/garden/layout", headers=auth_headers)).json()
        assert (layout["placedBeds"][0]["footprintW"], layout["placedBeds"][0]["footprintH"]) == (8, 4)

    async def test_rotation_that_would_overlap_is_rejected(self, client, api, auth_headers):
        await api.garden()
        bed_a = await api.bed("A", width=48, height=96)
        bed_b = await api.bed("B", width=48, height=96)
        await api.position(bed_a["id"], 0, 0)
        await api.position(bed_b["id"], 4, 0)

        response = await client.patch(
            f"/api/v1/beds/{bed_a['id']}", json={"gardenRotated": True}, headers=auth_headers
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "OVERLAP"
