# 📄 File: tests/test_api_planting.py
# 🧭 Purpose (Layman Explanation):
# Checks planting through the web API: putting plants in bed squares, keeping plants far
# enough apart, swapping plants, clearing squares and recording finished plantings.
#
# 🧪 Purpose (Technical Summary):
# API tests for /beds/{id}/place, /clear, /blocked-cells, /rotation-check, /history,
# /duplicate and the /placements lifecycle endpoints.

from datetime import date


class TestPlacePlant:
    async def test_spacing_conflict_and_clear_neighbour(self, api):
        bed = await api.bed("Veg", width=48, height=96, cell=12)
        tomato = await api.plant("Tomato", spacing=24)
        await api.place(bed["id"], tomato["id"], 0, 0)

        blocked = await api.place(bed["id"], tomato["id"], 1, 1)
        assert blocked.status_code == 409
        error = blocked.json()["error"]
        assert error["code"] == "SPACING_CONFLICT"
        assert error["details"]["required_cells"] == 2
        assert error["details"]["existing"] == "Tomato"

        allowed = await api.place(bed["id"], tomato["id"], 2, 2)
        assert allowed.status_code == 200
        assert allowed.json()["plantName"] == "Tomato"
        assert allowed.json()["status"] == "planned"

    async def test_out_of_bed_is_rejected(self, api):
        bed = await api.bed("Veg", width=48, height=96)
        plant = await api.plant("Lettuce")

        response = await api.place(bed["id"], plant["id"], 4, 0)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "OUT_OF_BOUNDS"

    async def test_fractional_cell_is_rejected(self, api):
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")

        response = await api.place(bed["id"], plant["id"], 1.5, 0)

        assert response.status_code == 422

    async def test_replacing_keeps_row_and_dates(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        tomato = await api.plant("Tomato")
        basil = await api.plant("Basil")
        first = (await api.place(bed["id"], tomato["id"], 0, 0)).json()

        patched = await client.patch(
            f"/api/v1/placements/{first['id']}",
            json={"seedsStartedDate": "2026-03-01"},
            headers=auth_headers,
        )
        assert patched.json()["status"] == "started"

        replaced = (await api.place(bed["id"], basil["id"], 0, 0)).json()

        assert replaced["id"] == first["id"]
        assert replaced["plantId"] == basil["id"]
        assert replaced["seedsStartedDate"] == "2026-03-01"

        detail = (await client.get(f"/api/v1/beds/{bed['id']}", headers=auth_headers)).json()
        assert len(detail["placements"]) == 1

    async def test_clear_is_idempotent(self, api):
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        await api.place(bed["id"], plant["id"], 1, 1)

        for _ in range(2):
            response = await api.clear(bed["id"], 1, 1)
            assert response.status_code == 200
            assert response.json() == {"ok": True}

        assert (await api.clear(bed["id"], 3, 3)).json() == {"ok": True}

    async def test_blocked_cells(self, client, api, auth_headers):
        bed = await api.bed("Veg", width=48, height=96)
        tomato = await api.plant("Tomato", spacing=24)
        await api.place(bed["id"], tomato["id"], 0, 0)

        response = await client.get(
            f"/api/v1/beds/{bed['id']}/blocked-cells",
            params={"plantId": tomato["id"]},
            headers=auth_headers,
        )

        body = response.json()
        assert body["requiredCells"] == 2
        assert body["cells"] == [{"x": 1, "y": 0}, {"x": 0, "y": 1}, {"x": 1, "y": 1}]


class TestPlacementLifecycle:
    async def test_archive_moves_to_history(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        tomato = await api.plant("Tomato")
        placement = (await api.place(bed["id"], tomato["id"], 2, 3)).json()
        await client.patch(
            f"/api/v1/placements/{placement['id']}",
            json={"harvestEndedDate": "2025-09-10", "harvestYield": 12, "harvestYieldUnit": "lbs"},
            headers=auth_headers,
        )

        archived = await client.post(f"/api/v1/placements/{placement['id']}/archive", headers=auth_headers)
        assert archived.status_code == 201
        entry = archived.json()
        assert (entry["seasonYear"], entry["seasonName"], entry["plantType"]) == (2025, "fall", "nightshade")

        gone = await client.get(f"/api/v1/placements/{placement['id']}", headers=auth_headers)
        assert gone.status_code == 404

        history = (await client.get(f"/api/v1/beds/{bed['id']}/history", headers=auth_headers)).json()
        assert history["years"] == [2025]
        assert [h["plantName"] for h in history["byYear"]["2025"]] == ["Tomato"]

    async def test_rotation_check_warns_for_recent_family(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        tomato = await api.plant("Tomato")
        pepper = await api.plant("Bell Pepper")
        placement = (await api.place(bed["id"], tomato["id"], 1, 1)).json()
        await client.patch(
            f"/api/v1/placements/{placement['id']}",
            json={"harvestEndedDate": date.today().isoformat()},
            headers=auth_headers,
        )
        await client.post(f"/api/v1/placements/{placement['id']}/archive", headers=auth_headers)

        params = {"plantId": pepper["id"], "x": 1, "y": 1}
        check = (
            await client.get(f"/api/v1/beds/{bed['id']}/rotation-check", params=params, headers=auth_headers)
        ).json()

        assert check["ok"] is False
        assert check["family"] == "nightshade"
        assert [w["plantName"] for w in check["warnings"]] == ["Tomato"]

    async def test_negative_yield_rejected(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        placement = (await api.place(bed["id"], plant["id"], 0, 0)).json()

        response = await client.patch(
            f"/api/v1/placements/{placement['id']}", json={"harvestYield": -1}, headers=auth_headers
        )

        assert response.status_code == 422

    async def test_delete_placement(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        placement = (await api.place(bed["id"], plant["id"], 0, 0)).json()

        response = await client.delete(f"/api/v1/placements/{placement['id']}", headers=auth_headers)

        assert response.json() == {"ok": True}
        detail = (await client.get(f"/api/v1/beds/{bed['id']}", headers=auth_headers)).json()
        assert detail["placements"] == []


class TestBedLifecycle:
    async def test_duplicate_copies_plants_not_dates(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        await api.position(bed["id"], 0, 0)
        placement = (await api.place(bed["id"], plant["id"], 0, 0)).json()
        await client.patch(
            f"/api/v1/placements/{placement['id']}",
            json={"transplantedDate": "2026-05-01"},
            headers=auth_headers,
        )

        response = await client.post(f"/api/v1/beds/{bed['id']}/duplicate", headers=auth_headers)

        assert response.status_code == 201
        copy = response.json()
        assert copy["name"] == "Veg (Copy)"
        assert copy["gardenX"] is None
        assert [(p["x"], p["y"], p["plantId"]) for p in copy["placements"]] == [(0, 0, plant["id"])]
        assert copy["placements"][0]["transplantedDate"] is None

    async def test_delete_bed(self, client, api, auth_headers):
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        await api.place(bed["id"], plant["id"], 0, 0)

        response = await client.delete(f"/api/v1/beds/{bed['id']}", headers=auth_headers)

        assert response.json() == {"ok": True}
        assert (await client.get(f"/api/v1/beds/{bed['id']}", headers=auth_headers)).status_code == 404
