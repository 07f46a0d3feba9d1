# 📄 File: tests/test_services.py
# 🧭 Purpose (Layman Explanation):
# Exercises the garden services directly against a real (in-memory) database.
#
# 🧪 Purpose (Technical Summary):
# Service-level tests over the SQLAlchemy repositories: placement archiving to history,
# rotation warnings, yearly archive and restore replay with missing plants.

from datetime import date

import pytest

from garden_planner.modules.garden_layout.domain.models.bed import Bed
from garden_planner.modules.garden_layout.domain.models.garden_year import (
    ArchivedBed,
    ArchivedPlacement,
    GardenYear,
)
from garden_planner.modules.garden_layout.domain.models.plant import Plant
from garden_planner.modules.garden_layout.domain.services.bed_planting_service import BedPlantingService
from garden_planner.modules.garden_layout.domain.services.garden_archive_service import GardenArchiveService
from garden_planner.modules.garden_layout.infrastructure.database import (
    BedRepositoryImpl,
    GardenRepositoryImpl,
    GardenYearRepositoryImpl,
    PlacementHistoryRepositoryImpl,
    PlacementRepositoryImpl,
    PlantRepositoryImpl,
)
from garden_planner.shared.core.exceptions import DuplicateResourceError, NotFoundError

OWNER = "owner-1"


@pytest.fixture
def planting_service(session):
    return BedPlantingService(
        BedRepositoryImpl(session),
        PlantRepositoryImpl(session),
        PlacementRepositoryImpl(session),
        PlacementHistoryRepositoryImpl(session),
    )


@pytest.fixture
def archive_service(session):
    return GardenArchiveService(
        GardenRepositoryImpl(session),
        BedRepositoryImpl(session),
        PlantRepositoryImpl(session),
        PlacementRepositoryImpl(session),
        GardenYearRepositoryImpl(session),
    )


async def make_bed(session, name="Bed One", **kwargs):
    return await BedRepositoryImpl(session).create(
        Bed(owner_id=OWNER, name=name, width_inches=48, height_inches=48, cell_inches=12, **kwargs)
    )


async def make_plant(session, name, spacing=12):
    return await PlantRepositoryImpl(session).create(Plant(owner_id=OWNER, name=name, spacing_inches=spacing))


class TestPlacementHistory:
    async def test_archive_moves_placement_into_history(self, session, planting_service):
        bed = await make_bed(session)
        tomato = await make_plant(session, "Cherry Tomato")
        placement = await planting_service.place_plant(OWNER, bed.id, tomato.id, 1, 2)
        await planting_service.update_placement(
            OWNER, placement.id, harvest_ended_date=date(2025, 8, 20), harvest_yield=4.5, harvest_yield_unit="lbs"
        )

        history = await planting_service.archive_placement(OWNER, placement.id)

        assert (history.season_year, history.season_name) == (2025, "summer")
        assert history.plant_type == "nightshade"
        assert history.harvest_yield == 4.5
        assert await PlacementRepositoryImpl(session).get_by_id(placement.id) is None
        assert len((await planting_service.get_bed_history(OWNER, bed.id)).history) == 1

    async def test_archive_without_harvest_end_uses_today(self, session, planting_service):
        bed = await make_bed(session)
        basil = await make_plant(session, "Basil")
        placement = await planting_service.place_plant(OWNER, bed.id, basil.id, 0, 0)

        history = await planting_service.archive_placement(OWNER, placement.id, today=date(2026, 4, 2))

        assert (history.season_year, history.season_name) == (2026, "spring")
        assert history.plant_type is None

    async def test_history_grouped_by_year_newest_first(self, session, planting_service):
        bed = await make_bed(session)
        pea = await make_plant(session, "Snap Pea")
        for year in (2023, 2025, 2024):
            placement = await planting_service.place_plant(OWNER, bed.id, pea.id, 0, 0)
            await planting_service.archive_placement(OWNER, placement.id, today=date(year, 6, 1))

        history = await planting_service.get_bed_history(OWNER, bed.id)

        assert history.years == [2025, 2024, 2023]
        assert [h.season_year for h in history.history] == [2025, 2024, 2023]


class TestRotationCheck:
    async def test_same_family_inside_window_warns(self, session, planting_service):
        bed = await make_bed(session)
        tomato = await make_plant(session, "Tomato")
        pepper = await make_plant(session, "Pepper")
        placement = await planting_service.place_plant(OWNER, bed.id, tomato.id, 1, 1)
        await planting_service.archive_placement(OWNER, placement.id, today=date(2024, 7, 1))

        check = await planting_service.check_rotation(OWNER, bed.id, pepper.id, 1, 1, today=date(2026, 5, 1))

        assert not check.ok
        assert check.family == "nightshade"
        assert [c.plant_name for c in check.conflicts] == ["Tomato"]

    async def test_outside_window_or_other_cell_is_ok(self, session, planting_service):
        bed = await make_bed(session)
        tomato = await make_plant(session, "Tomato")
        placement = await planting_service.place_plant(OWNER, bed.id, tomato.id, 1, 1)
        await planting_service.archive_placement(OWNER, placement.id, today=date(2023, 7, 1))

        assert (await planting_service.check_rotation(OWNER, bed.id, tomato.id, 1, 1, today=date(2026, 5, 1))).ok
        assert (await planting_service.check_rotation(OWNER, bed.id, tomato.id, 2, 2, today=date(2024, 5, 1))).ok


class TestGardenArchive:
    async def test_duplicate_year_is_rejected(self, session, archive_service):
        await make_bed(session)
        await archive_service.archive_year(OWNER, year=2025)

        with pytest.raises(DuplicateResourceError) as exc_info:
            await archive_service.archive_year(OWNER, year=2025)
        assert "already exists" in exc_info.value.message

        assert (await archive_service.archive_year(OWNER, year=2026)).year == 2026

    async def test_archive_defaults(self, session, archive_service):
        archive = await archive_service.archive_year(OWNER, today=date(2027, 1, 5))
        assert archive.year == 2027
        assert archive.name == "2027 Garden"
        assert archive.garden_snapshot is None
        assert archive.total_beds == 0
        assert archive.total_harvest is None

    async def test_missing_archive_is_not_found(self, archive_service):
        with pytest.raises(NotFoundError):
            await archive_service.get_year(OWNER, 1999)
        with pytest.raises(NotFoundError):
            await archive_service.delete_year(OWNER, 1999)


class TestRestore:
    async def _store_archive(self, session):
        return await GardenYearRepositoryImpl(session).create(
            GardenYear(
                owner_id=OWNER,
                year=2024,
                name="2024 Garden",
                beds_snapshot=[
                    ArchivedBed(
                        name="bed one",
                        width_inches=48,
                        height_inches=48,
                        cell_inches=12,
                        garden_x=2,
                        garden_y=3,
                        placements=[
                            ArchivedPlacement(x=0, y=0, plant_name="tomato"),
                            ArchivedPlacement(x=1, y=0, plant_name="Okra"),
                            ArchivedPlacement(x=2, y=0, plant_name="OKRA"),
                            ArchivedPlacement(x=3, y=0, plant_name="Pumpkin"),
                        ],
                    ),
                    ArchivedBed(
                        name="Herb Bed",
                        width_inches=24,
                        height_inches=24,
                        cell_inches=12,
                        garden_x=0,
                        garden_y=0,
                        placements=[ArchivedPlacement(x=1, y=1, plant_name="Okra")],
                    ),
                ],
                total_beds=2,
                total_placements=5,
            )
        )

    async def test_missing_plants_reported_once_per_spelling(self, session, archive_service):
        existing = await make_bed(session, name="Bed One")
        await make_plant(session, "Tomato")
        await self._store_archive(session)

        report = await archive_service.restore_year(OWNER, 2024)

        assert report.plants_not_found == ["Okra", "OKRA", "Pumpkin"]
        assert report.placements_created == 1
        assert report.beds_updated == 1
        assert report.beds_created == 1

        restored = await BedRepositoryImpl(session).get_by_id(existing.id)
        assert (restored.garden_x, restored.garden_y) == (2, 3)

    async def test_restore_without_layout_creates_unplaced_beds(self, session, archive_service):
        existing = await make_bed(session, name="Bed One")
        await self._store_archive(session)

        report = await archive_service.restore_year(OWNER, 2024, restore_layout=False)

        assert report.beds_updated == 0
        assert report.beds_created == 1
        beds = {b.name: b for b in await BedRepositoryImpl(session).list_for_owner(OWNER)}
        assert beds["Herb Bed"].garden_x is None
        assert (await BedRepositoryImpl(session).get_by_id(existing.id)).garden_x is None

    async def test_restore_never_overwrites_occupied_cells(self, session, archive_service, planting_service):
        bed = await make_bed(session, name="Bed One")
        tomato = await make_plant(session, "Tomato")
        basil = await make_plant(session, "Basil")
        await planting_service.place_plant(OWNER, bed.id, basil.id, 0, 0)
        await self._store_archive(session)

        report = await archive_service.restore_year(OWNER, 2024, restore_layout=False)

        assert report.placements_created == 0
        cell = await PlacementRepositoryImpl(session).get_at(bed.id, 0, 0)
        assert cell.plant_id == basil.id
        assert cell.plant_id != tomato.id

    async def test_same_named_archived_beds_are_each_recreated(self, session, archive_service):
        await make_plant(session, "Tomato")
        await GardenYearRepositoryImpl(session).create(
            GardenYear(
                owner_id=OWNER,
                year=2023,
                name="2023 Garden",
                beds_snapshot=[
                    ArchivedBed(
                        name="Raised",
                        width_inches=48,
                        height_inches=48,
                        cell_inches=12,
                        garden_x=x,
                        garden_y=y,
                        placements=[ArchivedPlacement(x=0, y=0, plant_name="Tomato")],
                    )
                    for x, y in ((0, 0), (5, 5))
                ],
                total_beds=2,
                total_placements=2,
            )
        )

        report = await archive_service.restore_year(OWNER, 2023)

        assert (report.beds_created, report.beds_updated, report.placements_created) == (2, 0, 2)
        beds = await BedRepositoryImpl(session).list_for_owner(OWNER)
        assert sorted((b.garden_x, b.garden_y) for b in beds) == [(0, 0), (5, 5)]
        placements = await PlacementRepositoryImpl(session).list_for_beds([b.id for b in beds])
        assert sorted(p.bed_id for p in placements) == sorted(b.id for b in beds)
