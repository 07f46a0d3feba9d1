# 📄 File: garden_planner/modules/garden_layout/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out the changes a gardener asks for: resizing the garden, moving beds, placing
# plants, archiving a season and so on. Each one is handed to the right garden service and
# written to the activity log.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers grouped by aggregate. Handlers unpack commands, call domain
# services and emit structured layout events; validation and persistence rules live in
# the services.
#
# 🔗 Dependencies:
# - application.commands
# - domain.services (GardenLayoutService, BedService, PlantService, BedPlantingService,
#   GardenArchiveService)
# - garden_planner.shared.utils.logging (structured layout events)
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (handler construction)
# - presentation.api.v1 routers

__all__ = [
    "GardenCommandHandler",
    "BedCommandHandler",
    "PlantCommandHandler",
    "PlantingCommandHandler",
    "ArchiveCommandHandler",
]

from typing import Tuple, List

from garden_planner.shared.utils.logging import get_logger

from ..commands.archive_commands import ArchiveYearCommand, RestoreYearCommand
from ..commands.bed_commands import CreateBedCommand, CreatePlantCommand, UpdateBedCommand
from ..commands.garden_commands import (
    CreateGateCommand,
    CreateWalkwayCommand,
    PositionBedCommand,
    UpdateWalkwayCommand,
    UpsertGardenCommand,
)
from ..commands.placement_commands import ClearCellCommand, PlacePlantCommand, UpdatePlacementCommand
from ...domain.models.bed import Bed
from ...domain.models.garden import Garden, Gate, Walkway
from ...domain.models.garden_year import GardenYear, RestoreReport
from ...domain.models.placement import BedPlacement, PlacementHistory
from ...domain.models.plant import Plant
from ...domain.services.bed_planting_service import BedPlantingService
from ...domain.services.bed_service import BedService
from ...domain.services.garden_archive_service import GardenArchiveService
from ...domain.services.garden_layout_service import GardenLayoutService
from ...domain.services.plant_service import PlantService

logger = get_logger(__name__)


class GardenCommandHandler:
    """Garden setup, bed positioning, walkways and gates."""

    def __init__(self, layout_service: GardenLayoutService):
        self._layout_service = layout_service

    async def upsert_garden(self, command: UpsertGardenCommand) -> Garden:
        garden = await self._layout_service.upsert_garden(
            command.owner_id,
            command.width_inches,
            command.height_inches,
            command.cell_inches,
        )
        logger.log_layout_event(
            "garden_saved",
            f"Garden saved ({garden.cols}x{garden.rows} cells)",
            owner_id=command.owner_id,
            garden_id=garden.id,
        )
        return garden

    async def position_bed(self, command: PositionBedCommand) -> Bed:
        bed = await self._layout_service.position_bed(
            command.owner_id,
            command.bed_id,
            command.garden_x,
            command.garden_y,
        )
        logger.log_layout_event(
            "bed_detached" if command.is_detach else "bed_positioned",
            f"Bed {bed.id} moved to ({bed.garden_x},{bed.garden_y})",
            owner_id=command.owner_id,
            bed_id=bed.id,
        )
        return bed

    async def create_walkway(self, command: CreateWalkwayCommand) -> Walkway:
        return await self._layout_service.create_walkway(
            command.owner_id,
            command.x,
            command.y,
            command.width,
            command.height,
            name=command.name,
        )

    async def update_walkway(self, command: UpdateWalkwayCommand) -> Walkway:
        return await self._layout_service.update_walkway(
            command.owner_id, command.walkway_id, **command.changes
        )

    async def delete_walkway(self, owner_id: str, walkway_id: int) -> None:
        await self._layout_service.delete_walkway(owner_id, walkway_id)

    async def create_gate(self, command: CreateGateCommand) -> Gate:
        return await self._layout_service.create_gate(
            command.owner_id,
            command.x,
            command.y,
            side=command.side,
            width=command.width,
            name=command.name,
        )

    async def delete_gate(self, owner_id: str, gate_id: int) -> None:
        await self._layout_service.delete_gate(owner_id, gate_id)


class BedCommandHandler:
    """Bed lifecycle. Rotation goes through the layout service so it is re-validated."""

    def __init__(self, bed_service: BedService, layout_service: GardenLayoutService):
        self._bed_service = bed_service
        self._layout_service = layout_service

    async def create_bed(self, command: CreateBedCommand) -> Bed:
        bed = await self._bed_service.create_bed(
            command.owner_id,
            command.name,
            width_inches=command.width_inches,
            height_inches=command.height_inches,
            cell_inches=command.cell_inches,
            micro_climate=command.micro_climate,
        )
        logger.log_layout_event("bed_created", f"Bed {bed.id} created", owner_id=command.owner_id, bed_id=bed.id)
        return bed

    async def update_bed(self, command: UpdateBedCommand) -> Bed:
        changes = dict(command.changes)
        rotated = changes.pop("garden_rotated", None)

        if rotated is not None:
            await self._layout_service.rotate_bed(command.owner_id, command.bed_id, bool(rotated))
        return await self._bed_service.update_bed(command.owner_id, command.bed_id, **changes)

    async def delete_bed(self, owner_id: str, bed_id: int) -> None:
        await self._bed_service.delete_bed(owner_id, bed_id)
        logger.log_layout_event("bed_deleted", f"Bed {bed_id} deleted", owner_id=owner_id, bed_id=bed_id)

    async def duplicate_bed(self, owner_id: str, bed_id: int) -> Tuple[Bed, List[BedPlacement]]:
        copy, placements = await self._bed_service.duplicate_bed(owner_id, bed_id)
        logger.log_layout_event(
            "bed_duplicated",
            f"Bed {bed_id} duplicated as {copy.id}",
            owner_id=owner_id,
            bed_id=copy.id,
            source_bed_id=bed_id,
        )
        return copy, placements


class PlantCommandHandler:
    def __init__(self, plant_service: PlantService):
        self._plant_service = plant_service

    async def create_plant(self, command: CreatePlantCommand) -> Plant:
        return await self._plant_service.create_plant(
            command.owner_id,
            command.name,
            spacing_inches=command.spacing_inches,
            days_to_maturity_min=command.days_to_maturity_min,
            days_to_maturity_max=command.days_to_maturity_max,
            notes=command.notes,
        )


class PlantingCommandHandler:
    """Bed-scale writes: place, clear, placement lifecycle and archiving to history."""

    def __init__(self, planting_service: BedPlantingService):
        self._planting_service = planting_service

    async def place_plant(self, command: PlacePlantCommand) -> BedPlacement:
        placement = await self._planting_service.place_plant(
            command.owner_id, command.bed_id, command.plant_id, command.x, command.y
        )
        logger.log_layout_event(
            "plant_placed",
            f"{placement.plant_name} placed in bed {placement.bed_id}",
            owner_id=command.owner_id,
            bed_id=placement.bed_id,
            placement_id=placement.id,
            cell_x=placement.x,
            cell_y=placement.y,
        )
        return placement

    async def clear_cell(self, command: ClearCellCommand) -> int:
        removed = await self._planting_service.clear_cell(
            command.owner_id, command.bed_id, command.x, command.y
        )
        if removed:
            logger.log_layout_event(
                "cell_cleared",
                f"Cleared cell in bed {command.bed_id}",
                owner_id=command.owner_id,
                bed_id=command.bed_id,
            )
        return removed

    async def update_placement(self, command: UpdatePlacementCommand) -> BedPlacement:
        return await self._planting_service.update_placement(
            command.owner_id, command.placement_id, **command.changes
        )

    async def delete_placement(self, owner_id: str, placement_id: int) -> None:
        await self._planting_service.delete_placement(owner_id, placement_id)

    async def archive_placement(self, owner_id: str, placement_id: int) -> PlacementHistory:
        history = await self._planting_service.archive_placement(owner_id, placement_id)
        logger.log_layout_event(
            "placement_archived",
            f"Placement {placement_id} archived to {history.season_name} {history.season_year}",
            owner_id=owner_id,
            bed_id=history.bed_id,
            history_id=history.id,
        )
        return history


class ArchiveCommandHandler:
    """Yearly archive writes and restore replay."""

    def __init__(self, archive_service: GardenArchiveService):
        self._archive_service = archive_service

    async def archive_year(self, command: ArchiveYearCommand) -> GardenYear:
        archive = await self._archive_service.archive_year(
            command.owner_id,
            year=command.year,
            name=command.name,
            notes=command.notes,
        )
        logger.log_layout_event(
            "garden_archived",
            f"Garden archived for {archive.year}",
            owner_id=command.owner_id,
            year=archive.year,
            total_beds=archive.total_beds,
            total_placements=archive.total_placements,
        )
        return archive

    async def delete_year(self, owner_id: str, year: int) -> None:
        await self._archive_service.delete_year(owner_id, year)

    async def restore_year(self, command: RestoreYearCommand) -> RestoreReport:
        report = await self._archive_service.restore_year(
            command.owner_id,
            command.year,
            restore_layout=command.restore_layout,
            restore_placements=command.restore_placements,
        )
        logger.log_layout_event(
            "garden_restored",
            report.message,
            owner_id=command.owner_id,
            year=command.year,
            beds_created=report.beds_created,
            beds_updated=report.beds_updated,
            placements_created=report.placements_created,
            plants_not_found=len(report.plants_not_found),
        )
        return report
