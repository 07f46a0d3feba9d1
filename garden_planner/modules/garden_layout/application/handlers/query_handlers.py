# 📄 File: garden_planner/modules/garden_layout/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers questions about a gardener's layout: what the garden looks like, what is in a bed,
# where a plant may still go, and what grew where in past seasons.
#
# 🧪 Purpose (Technical Summary):
# CQRS read-side handlers grouped by aggregate. Every read is owner-scoped through the
# domain services, so foreign records are reported exactly like missing ones.
#
# 🔗 Dependencies:
# - domain.services (GardenLayoutService, BedService, PlantService, BedPlantingService,
#   GardenArchiveService)
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (handler construction)
# - presentation.api.v1 routers

__all__ = [
    "GardenQueryHandler",
    "BedQueryHandler",
    "PlantQueryHandler",
    "PlacementQueryHandler",
    "ArchiveQueryHandler",
]

import logging
from typing import Any, List, Optional, Tuple

from ...domain.models.bed import Bed
from ...domain.models.garden import Garden, Gate, Walkway
from ...domain.models.garden_year import GardenYear
from ...domain.models.placement import BedPlacement
from ...domain.models.plant import Plant
from ...domain.services.bed_planting_service import (
    BedHistory,
    BedPlantingService,
    BlockedCells,
    RotationCheck,
)
from ...domain.services.bed_service import BedService
from ...domain.services.garden_archive_service import GardenArchiveService
from ...domain.services.garden_layout_service import GardenLayout, GardenLayoutService
from ...domain.services.plant_service import PlantService

logger = logging.getLogger(__name__)


class GardenQueryHandler:
    def __init__(self, layout_service: GardenLayoutService):
        self._layout_service = layout_service

    async def get_garden(self, owner_id: str) -> Optional[Garden]:
        return await self._layout_service.get_garden(owner_id)

    async def get_layout(self, owner_id: str) -> GardenLayout:
        """Garden, placed and unplaced beds, walkways and gates in one read."""
        layout = await self._layout_service.get_layout(owner_id)
        logger.debug(
            f"Layout for owner {owner_id}: {len(layout.placed_beds)} placed, "
            f"{len(layout.unplaced_beds)} unplaced beds"
        )
        return layout

    async def list_walkways(self, owner_id: str) -> List[Walkway]:
        return await self._layout_service.list_walkways(owner_id)

    async def list_gates(self, owner_id: str) -> List[Gate]:
        return await self._layout_service.list_gates(owner_id)


class BedQueryHandler:
    """Bed reads plus bed-scale planning helpers (blocked cells, rotation, history)."""

    def __init__(self, bed_service: BedService, planting_service: BedPlantingService):
        self._bed_service = bed_service
        self._planting_service = planting_service

    async def list_beds(self, owner_id: str) -> List[Bed]:
        return await self._bed_service.list_beds(owner_id)

    async def get_bed(self, owner_id: str, bed_id: int) -> Tuple[Bed, List[BedPlacement]]:
        return await self._bed_service.get_bed(owner_id, bed_id)

    async def get_blocked_cells(self, owner_id: str, bed_id: int, plant_id: int) -> BlockedCells:
        return await self._planting_service.get_blocked_cells(owner_id, bed_id, plant_id)

    async def check_rotation(self, owner_id: str, bed_id: int, plant_id: int, x: Any, y: Any) -> RotationCheck:
        return await self._planting_service.check_rotation(owner_id, bed_id, plant_id, x, y)

    async def get_history(self, owner_id: str, bed_id: int) -> BedHistory:
        return await self._planting_service.get_bed_history(owner_id, bed_id)


class PlantQueryHandler:
    def __init__(self, plant_service: PlantService):
        self._plant_service = plant_service

    async def list_plants(self, owner_id: str) -> List[Plant]:
        return await self._plant_service.list_plants(owner_id)


class PlacementQueryHandler:
    def __init__(self, planting_service: BedPlantingService):
        self._planting_service = planting_service

    async def get_placement(self, owner_id: str, placement_id: int) -> BedPlacement:
        return await self._planting_service.get_placement(owner_id, placement_id)


class ArchiveQueryHandler:
    def __init__(self, archive_service: GardenArchiveService):
        self._archive_service = archive_service

    async def list_years(self, owner_id: str) -> List[GardenYear]:
        return await self._archive_service.list_years(owner_id)

    async def get_year(self, owner_id: str, year: int) -> GardenYear:
        return await self._archive_service.get_year(owner_id, year)
