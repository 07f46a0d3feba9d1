# 📄 File: tests/test_api_archive.py
# 🧭 Purpose (Layman Explanation):
# Checks saving a whole year's garden as an archive and bringing it back later.
#
# 🧪 Purpose (Technical Summary):
# API tests for /garden-years: archive (one per owner and year), list, get, delete and
# restore replay counts.


class TestArchiveYear:
    async def test_archive_snapshot(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        await api.position(bed["id"], 0, 0)
        await api.place(bed["id"], plant["id"], 0, 0)

        response = await client.post(
            "/api/v1/garden-years", json={"year": 2025, "notes": "dry summer"}, headers=auth_headers
        )

        assert response.status_code == 201
        archive = response.json()
        assert archive["name"] == "2025 Garden"
        assert (archive["totalBeds"], archive["totalPlacements"]) == (1, 1)
        assert archive["gardenSnapshot"]["width_inches"] == 120
        assert archive["bedsSnapshot"][0]["placements"][0]["plantName"] == "Lettuce"

    async def test_one_archive_per_year(self, client, auth_headers):
        first = await client.post("/api/v1/garden-years", json={"year": 2024}, headers=auth_headers)
        again = await client.post("/api/v1/garden-years", json={"year": 2024}, headers=auth_headers)
        other = await client.post("/api/v1/garden-years", json={"year": 2025}, headers=auth_headers)

        assert first.status_code == 201
        assert again.status_code == 409
        assert again.json()["error"]["code"] == "DUPLICATE_RESOURCE"
        assert other.status_code == 201

        years = (await client.get("/api/v1/garden-years", headers=auth_headers)).json()
        assert [y["year"] for y in years] == [2025, 2024]

    async def test_body_is_optional(self, client, auth_headers):
        response = await client.post("/api/v1/garden-years", headers=auth_headers)
        assert response.status_code == 201

    async def test_get_and_delete(self, client, auth_headers):
        await client.post("/api/v1/garden-years", json={"year": 2023}, headers=auth_headers)

        assert (await client.get("/api/v1/garden-years/2023", headers=auth_headers)).status_code == 200
        assert (await client.delete("/api/v1/garden-years/2023", headers=auth_headers)).json() == {"ok": True}
        assert (await client.get("/api/v1/garden-years/2023", headers=auth_headers)).status_code == 404


class TestRestoreYear:
    async def test_restore_recreates_deleted_bed(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("Veg")
        plant = await api.plant("Lettuce")
        await api.position(bed["id"], 2, 1)
        await api.place(bed["id"], plant["id"], 0, 0)
        await api.place(bed["id"], plant["id"], 3, 3)
        await client.post("/api/v1/garden-years", json={"year": 2025}, headers=auth_headers)
        await client.delete(f"/api/v1/beds/{bed['id']}", headers=auth_headers)

        response = await client.post("/api/v1/garden-years/2025/restore", headers=auth_headers)

        assert response.status_code == 200
        report = response.json()
        assert (report["bedsCreated"], report["bedsUpdated"], report["placementsCreated"]) == (1, 0, 2)
        assert report["plantsNotFound"] == []

        layout = (await client.get("/api/v1/garden/layout", headers=auth_headers)).json()
        restored = layout["placedBeds"][0]
        assert (restored["name"], restored["gardenX"], restored["gardenY"]) == ("Veg", 2, 1)

    async def test_restore_moves_existing_bed_back(self, client, api, auth_headers):
        await api.garden()
        bed = await api.bed("Veg")
        await api.position(bed["id"], 0, 0)
        await client.post("/api/v1/garden-years", json={"year": 2025}, headers=auth_headers)
        await api.position(bed["id"], 5, 0)

        report = (
            await client.post(
                "/api/v1/garden-years/2025/restore",
                json={"restorePlacements": False},
                headers=auth_headers,
            )
        ).json()

        assert report["bedsUpdated"] == 1
        assert report["bedsCreated"] == 0
        moved = (await client.get(f"/api/v1/beds/{bed['id']}", headers=auth_headers)).json()
        assert moved["gardenX"] == 0

    async def test_restore_missing_year(self, client, auth_headers):
        response = await client.post("/api/v1/garden-years/1990/restore", headers=auth_headers)
        assert response.status_code == 404
