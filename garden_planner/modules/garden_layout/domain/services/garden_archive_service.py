# 📄 File: garden_planner/modules/garden_layout/domain/services/garden_archive_service.py
# 🧭 Purpose (Layman Explanation):
# Takes an end-of-season snapshot of the whole garden and, later, rebuilds a garden from it:
# beds come back in the same spots and plants go back in the same squares wherever that
# still makes sense.
# 🧪 Purpose (Technical Summary):
# Yearly archive writer plus best-effort restore replay. Beds and plants are re-linked by
# case-insensitive name; unknown plant names are reported instead of failing the restore.
# 🔗 Dependencies:
# garden/bed/plant/placement/garden-year repositories, settings
# 🔄 Connected Modules / Calls From:
# application.handlers (archive command/query handlers)

import logging
from datetime import date
from typing import Dict, List, Optional, Set, Tuple

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.exceptions import DuplicateResourceError, NotFoundError

from ..models.bed import Bed
from ..models.garden_year import ArchivedBed, ArchivedPlacement, GardenYear, RestoreReport
from ..models.placement import BedPlacement
from ..models.plant import Plant
from ..repositories.bed_repository import BedRepository
from ..repositories.garden_repository import GardenRepository
from ..repositories.garden_year_repository import GardenYearRepository
from ..repositories.placement_repository import PlacementRepository
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)


class GardenArchiveService:
    """Domain service for yearly garden archives and restore replay."""

    def __init__(
        self,
        garden_repository: GardenRepository,
        bed_repository: BedRepository,
        plant_repository: PlantRepository,
        placement_repository: PlacementRepository,
        garden_year_repository: GardenYearRepository,
        settings: Optional[Settings] = None,
    ):
        self._gardens = garden_repository
        self._beds = bed_repository
        self._plants = plant_repository
        self._placements = placement_repository
        self._years = garden_year_repository
        self._settings = settings or get_settings()

    # =========================================================================
    # ARCHIVE
    # =========================================================================

    async def archive_year(
        self,
        owner_id: str,
        year: Optional[int] = None,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        today: Optional[date] = None,
    ) -> GardenYear:
        """
        Snapshot the owner's garden and beds under `year`.

        Args:
            owner_id: Opaque owner id
            year: Archive year, defaults to the current year
            name: Display name, defaults to "{year} Garden"
            notes: Free-form notes
            today: Reference date for the default year

        Returns:
            GardenYear: Stored archive

        Raises:
            DuplicateResourceError: An archive already exists for (owner, year)
        """
        year = year if year is not None else (today or date.today()).year
        if await self._years.get_by_year(owner_id, year) is not None:
            raise DuplicateResourceError(
                f"Archive for {year} already exists. Delete it first to create a new one.",
                resource_type="garden_year",
                conflicting_field="year",
                conflicting_value=year,
            )

        garden = await self._gardens.get_by_owner(owner_id)
        garden_snapshot = None
        if garden is not None:
            garden_snapshot = {
                "width_inches": garden.width_inches,
                "height_inches": garden.height_inches,
                "cell_inches": garden.cell_inches,
            }

        beds = await self._beds.list_for_owner(owner_id)
        placements_by_bed: Dict[int, List[BedPlacement]] = {bed.id: [] for bed in beds}
        for placement in await self._placements.list_for_beds([bed.id for bed in beds]):
            placements_by_bed.setdefault(placement.bed_id, []).append(placement)

        beds_snapshot = [
            self._archive_bed(bed, placements_by_bed.get(bed.id, [])) for bed in beds
        ]
        total_placements = sum(len(bed.placements) for bed in beds_snapshot)
        total_harvest = sum(
            p.harvest_yield or 0 for bed in beds_snapshot for p in bed.placements
        )

        archive = await self._years.create(
            GardenYear(
                owner_id=owner_id,
                year=year,
                name=name or f"{year} Garden",
                garden_snapshot=garden_snapshot,
                beds_snapshot=beds_snapshot,
                total_beds=len(beds_snapshot),
                total_placements=total_placements,
                total_harvest=total_harvest or None,
                harvest_unit=self._settings.ARCHIVE_HARVEST_UNIT,
                notes=notes,
            )
        )
        logger.info(
            f"Archived {year} for owner {owner_id}: {archive.total_beds} beds, "
            f"{archive.total_placements} placements"
        )
        return archive

    async def list_years(self, owner_id: str) -> List[GardenYear]:
        return await self._years.list_for_owner(owner_id)

    async def get_year(self, owner_id: str, year: int) -> GardenYear:
        archive = await self._years.get_by_year(owner_id, year)
        if archive is None:
            raise NotFoundError("Archive not found", resource_type="garden_year", resource_id=year)
        return archive

    async def delete_year(self, owner_id: str, year: int) -> None:
        if not await self._years.delete(owner_id, year):
            raise NotFoundError("Archive not found", resource_type="garden_year", resource_id=year)
        logger.info(f"Archive {year} deleted by owner {owner_id}")

    # =========================================================================
    # RESTORE
    # =========================================================================

    async def restore_year(
        self,
        owner_id: str,
        year: int,
        restore_layout: bool = True,
        restore_placements: bool = True,
    ) -> RestoreReport:
        """
        Replay an archive into the live garden.

        Archived beds match the beds that existed before the restore by
        case-insensitive name: matches are updated in place when `restore_layout`
        is set, every other archived bed is created (same-named archived beds are
        each recreated). Placements are only added to free cells, and plants that
        no longer exist are reported once per exact spelling in `plants_not_found`
        rather than failing the restore.

        Overlap and spacing are not re-validated; the archive was a valid layout
        when it was taken.
        """
        archive = await self.get_year(owner_id, year)
        report = RestoreReport(year=year)

        beds_by_name: Dict[str, Bed] = {}
        for bed in await self._beds.list_for_owner(owner_id):
            beds_by_name[bed.name.lower()] = bed

        plants_by_name: Dict[str, Plant] = {}
        for plant in await self._plants.list_for_owner(owner_id):
            plants_by_name[plant.name.lower()] = plant

        missing_seen: Set[str] = set()

        for archived in archive.beds_snapshot:
            target = beds_by_name.get(archived.name.lower())

            if target is not None:
                if restore_layout:
                    target.garden_x = archived.garden_x
                    target.garden_y = archived.garden_y
                    target.garden_rotated = archived.garden_rotated
                    target.micro_climate = archived.micro_climate
                    target = await self._beds.update(target)
                    report.beds_updated += 1
            else:
                target = await self._beds.create(
                    Bed(
                        owner_id=owner_id,
                        name=archived.name,
                        width_inches=archived.width_inches,
                        height_inches=archived.height_inches,
                        cell_inches=archived.cell_inches,
                        garden_x=archived.garden_x if restore_layout else None,
                        garden_y=archived.garden_y if restore_layout else None,
                        garden_rotated=archived.garden_rotated,
                        micro_climate=archived.micro_climate,
                    )
                )
                report.beds_created += 1

            if not restore_placements:
                continue

            occupied: Set[Tuple[int, int]] = {
                (p.x, p.y) for p in await self._placements.list_for_bed(target.id)
            }
            for archived_placement in archived.placements:
                plant = plants_by_name.get(archived_placement.plant_name.lower())
                if plant is None:
                    if archived_placement.plant_name not in missing_seen:
                        missing_seen.add(archived_placement.plant_name)
                        report.plants_not_found.append(archived_placement.plant_name)
                    continue

                cell = (archived_placement.x, archived_placement.y)
                if cell in occupied:
                    continue

                await self._placements.create(
                    BedPlacement(
                        bed_id=target.id,
                        plant_id=plant.id,
                        x=archived_placement.x,
                        y=archived_placement.y,
                        w=archived_placement.w,
                        h=archived_placement.h,
                        count=archived_placement.count,
                        plant_name=plant.name,
                        plant_spacing_inches=plant.spacing_inches,
                    )
                )
                occupied.add(cell)
                report.placements_created += 1

        logger.info(
            f"Restored {year} for owner {owner_id}: {report.beds_created} created, "
            f"{report.beds_updated} updated, {report.placements_created} placements, "
            f"{len(report.plants_not_found)} plants missing"
        )
        return report

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _archive_bed(bed: Bed, placements: List[BedPlacement]) -> ArchivedBed:
        return ArchivedBed(
            id=bed.id,
            name=bed.name,
            width_inches=bed.width_inches,
            height_inches=bed.height_inches,
            cell_inches=bed.cell_inches,
            garden_x=bed.garden_x,
            garden_y=bed.garden_y,
            garden_rotated=bed.garden_rotated,
            micro_climate=bed.micro_climate,
            placements=[
                ArchivedPlacement(
                    x=p.x,
                    y=p.y,
                    w=p.w,
                    h=p.h,
                    count=p.count,
                    plant_name=p.plant_name or "",
                    plant_spacing=p.plant_spacing_inches,
                    seeds_started_date=p.seeds_started_date,
                    transplanted_date=p.transplanted_date,
                    direct_sowed_date=p.direct_sowed_date,
                    harvest_started_date=p.harvest_started_date,
                    harvest_ended_date=p.harvest_ended_date,
                    harvest_yield=p.harvest_yield,
                    harvest_yield_unit=p.harvest_yield_unit,
                )
                for p in placements
            ],
        )
