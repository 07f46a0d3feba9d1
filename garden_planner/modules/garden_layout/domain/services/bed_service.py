# 📄 File: garden_planner/modules/garden_layout/domain/services/bed_service.py
# 🧭 Purpose (Layman Explanation):
# Creates, renames, copies and deletes garden beds. Moving a bed around the garden lives
# in the garden layout service instead.
# 🧪 Purpose (Technical Summary):
# Bed lifecycle domain service: creation with configured defaults, owner-scoped reads with
# placements, partial updates, deletion and duplication (placements copied without dates).
# 🔗 Dependencies:
# bed/placement repositories, ownership helpers, settings
# 🔄 Connected Modules / Calls From:
# application.handlers (bed command/query handlers)

import logging
from typing import Any, List, Optional, Tuple

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.exceptions import ValidationError

from ..models.bed import Bed
from ..models.placement import BedPlacement
from ..repositories.bed_repository import BedRepository
from ..repositories.placement_repository import PlacementRepository
from .ownership import load_owned_bed

logger = logging.getLogger(__name__)


def _require_positive(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{field} must be a positive whole number of inches.",
            field=field,
            value=value,
            constraint=">0",
        )
    return value


class BedService:
    """Domain service for bed lifecycle operations."""

    def __init__(
        self,
        bed_repository: BedRepository,
        placement_repository: PlacementRepository,
        settings: Optional[Settings] = None,
    ):
        self._beds = bed_repository
        self._placements = placement_repository
        self._settings = settings or get_settings()

    async def create_bed(
        self,
        owner_id: str,
        name: str,
        width_inches: Optional[int] = None,
        height_inches: Optional[int] = None,
        cell_inches: Optional[int] = None,
        micro_climate: Optional[str] = None,
    ) -> Bed:
        """
        Create an unplaced bed; missing dimensions fall back to the configured defaults.

        Raises:
            ValidationError: Empty name or non-positive dimensions
        """
        if not name or not name.strip():
            raise ValidationError("Bed name is required.", field="name")

        bed = Bed(
            owner_id=owner_id,
            name=name.strip(),
            width_inches=_require_positive(
                width_inches if width_inches is not None else self._settings.DEFAULT_BED_WIDTH_INCHES,
                "widthInches",
            ),
            height_inches=_require_positive(
                height_inches if height_inches is not None else self._settings.DEFAULT_BED_HEIGHT_INCHES,
                "heightInches",
            ),
            cell_inches=_require_positive(
                cell_inches if cell_inches is not None else self._settings.DEFAULT_BED_CELL_INCHES,
                "cellInches",
            ),
            micro_climate=micro_climate,
        )
        created = await self._beds.create(bed)
        logger.info(f"Bed {created.id} '{created.name}' created for owner {owner_id}")
        return created

    async def list_beds(self, owner_id: str) -> List[Bed]:
        return await self._beds.list_for_owner(owner_id)

    async def get_bed(self, owner_id: str, bed_id: int) -> Tuple[Bed, List[BedPlacement]]:
        """Bed with its current placements."""
        bed = await load_owned_bed(self._beds, owner_id, bed_id)
        return bed, await self._placements.list_for_bed(bed_id)

    async def update_bed(self, owner_id: str, bed_id: int, **changes: Any) -> Bed:
        """
        Patch a bed's name and/or micro climate.

        Garden position and rotation go through GardenLayoutService so they are
        validated against the garden.
        """
        bed = await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)

        if "name" in changes:
            name = changes["name"]
            if not name or not name.strip():
                raise ValidationError("Bed name is required.", field="name")
            bed.name = name.strip()
        if "micro_climate" in changes:
            bed.micro_climate = changes["micro_climate"]

        return await self._beds.update(bed)

    async def delete_bed(self, owner_id: str, bed_id: int) -> None:
        await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)
        await self._beds.delete(bed_id)
        logger.info(f"Bed {bed_id} deleted by owner {owner_id}")

    async def duplicate_bed(self, owner_id: str, bed_id: int) -> Tuple[Bed, List[BedPlacement]]:
        """
        Copy a bed as "<name> (Copy)", unplaced, with placements minus dates and yield.
        """
        source = await load_owned_bed(self._beds, owner_id, bed_id)
        copy = await self._beds.create(
            Bed(
                owner_id=owner_id,
                name=f"{source.name} (Copy)",
                width_inches=source.width_inches,
                height_inches=source.height_inches,
                cell_inches=source.cell_inches,
                garden_rotated=source.garden_rotated,
                micro_climate=source.micro_climate,
            )
        )

        placements: List[BedPlacement] = []
        for placement in await self._placements.list_for_bed(bed_id):
            placements.append(
                await self._placements.create(
                    BedPlacement(
                        bed_id=copy.id,
                        plant_id=placement.plant_id,
                        x=placement.x,
                        y=placement.y,
                        w=placement.w,
                        h=placement.h,
                        count=placement.count,
                        plant_name=placement.plant_name,
                        plant_spacing_inches=placement.plant_spacing_inches,
                    )
                )
            )

        logger.info(f"Bed {bed_id} duplicated as {copy.id} with {len(placements)} placements")
        return copy, placements
