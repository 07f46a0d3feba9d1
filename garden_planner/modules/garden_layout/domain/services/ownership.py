"""
Owner-scoped loaders shared by the garden layout services.

A record that does not exist and a record owned by someone else raise errors
with the same message and code, so responses never reveal other users' data.
"""

import logging
from typing import Optional

from garden_planner.shared.core.exceptions import AccessDeniedError, NotFoundError

from ..models.bed import Bed
from ..models.placement import BedPlacement
from ..models.plant import Plant
from ..repositories.bed_repository import BedRepository
from ..repositories.placement_repository import PlacementRepository
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)


def check_owner(record_owner_id: Optional[str], owner_id: str, resource_type: str, resource_id: int) -> None:
    if record_owner_id != owner_id:
        logger.warning(f"Owner {owner_id} denied access to {resource_type} {resource_id}")
        raise AccessDeniedError(
            f"{resource_type.capitalize()} not found",
            resource_type=resource_type,
            resource_id=resource_id,
        )


async def load_owned_bed(
    beds: BedRepository,
    owner_id: str,
    bed_id: int,
    for_update: bool = False,
) -> Bed:
    bed = await beds.get_by_id(bed_id, for_update=for_update)
    if bed is None:
        raise NotFoundError("Bed not found", resource_type="bed", resource_id=bed_id)
    check_owner(bed.owner_id, owner_id, "bed", bed_id)
    return bed


async def load_owned_plant(plants: PlantRepository, owner_id: str, plant_id: int) -> Plant:
    plant = await plants.get_by_id(plant_id)
    if plant is None:
        raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant_id)
    check_owner(plant.owner_id, owner_id, "plant", plant_id)
    return plant


async def load_owned_placement(
    placements: PlacementRepository,
    beds: BedRepository,
    owner_id: str,
    placement_id: int,
    lock_bed: bool = False,
) -> BedPlacement:
    """Placement ownership is transitive through its bed."""
    placement = await placements.get_by_id(placement_id)
    if placement is None:
        raise NotFoundError("Placement not found", resource_type="placement", resource_id=placement_id)
    bed = await beds.get_by_id(placement.bed_id, for_update=lock_bed)
    check_owner(bed.owner_id if bed else None, owner_id, "placement", placement_id)
    return placement
