# 📄 File: garden_planner/modules/garden_layout/domain/services/bed_planting_service.py
# 🧭 Purpose (Layman Explanation):
# Handles everything that happens inside one bed: putting a plant in a square (if it is not
# too close to its neighbours), clearing squares, tracking a planting's season, and keeping
# a history of what grew where so crops can be rotated.
# 🧪 Purpose (Technical Summary):
# Bed-scale domain service. Locks the bed row, runs the Chebyshev spacing validator against
# the bed's current placements, then upserts the single affected placement. Also owns
# placement lifecycle edits, archiving to PlacementHistory and rotation warnings.
# 🔗 Dependencies:
# bed/plant/placement/history repositories, spacing_validator, seasons, ownership helpers
# 🔄 Connected Modules / Calls From:
# application.handlers (planting command/query handlers)

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Set, Tuple

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.exceptions import SpacingConflictError, ValidationError

from ..models.placement import LIFECYCLE_DATE_FIELDS, BedPlacement, PlacementHistory
from ..repositories.bed_repository import BedRepository
from ..repositories.placement_repository import PlacementHistoryRepository, PlacementRepository
from ..repositories.plant_repository import PlantRepository
from .grid import GridRect
from .layout_validator import coerce_cell_coordinate, ensure_within
from .ownership import load_owned_bed, load_owned_placement, load_owned_plant
from .seasons import plant_family, season_for
from .spacing_validator import blocked_cells, find_spacing_conflict, required_cells

logger = logging.getLogger(__name__)

EDITABLE_PLACEMENT_FIELDS = LIFECYCLE_DATE_FIELDS + (
    "harvest_yield",
    "harvest_yield_unit",
    "notes",
    "count",
)


@dataclass
class BlockedCells:
    required_cells: int
    cells: Set[Tuple[int, int]]


@dataclass
class BedHistory:
    history: List[PlacementHistory]
    by_year: Dict[int, List[PlacementHistory]] = field(default_factory=dict)

    @property
    def years(self) -> List[int]:
        return sorted(self.by_year, reverse=True)


@dataclass
class RotationCheck:
    family: Optional[str]
    conflicts: List[PlacementHistory] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.conflicts


class BedPlantingService:
    """
    Domain service for plant placement inside a bed's grid.

    Spacing is measured in bed cells with a square exclusion zone:
    a cell is blocked when another plant sits less than `required_cells`
    away on both axes.
    """

    def __init__(
        self,
        bed_repository: BedRepository,
        plant_repository: PlantRepository,
        placement_repository: PlacementRepository,
        history_repository: PlacementHistoryRepository,
        settings: Optional[Settings] = None,
    ):
        self._beds = bed_repository
        self._plants = plant_repository
        self._placements = placement_repository
        self._history = history_repository
        self._settings = settings or get_settings()

    # =========================================================================
    # PLACE / CLEAR
    # =========================================================================

    async def place_plant(self, owner_id: str, bed_id: int, plant_id: int, x: Any, y: Any) -> BedPlacement:
        """
        Put a plant on bed cell (x, y).

        An occupied target cell keeps its placement row and lifecycle data;
        only the plant reference changes.

        Raises:
            ValidationError: Non-integer coordinates
            NotFoundError / AccessDeniedError: Bed or plant missing or foreign
            OutOfBoundsError: Cell outside the bed grid
            SpacingConflictError: Another plant is within the required spacing
        """
        x = coerce_cell_coordinate(x, "x")
        y = coerce_cell_coordinate(y, "y")

        bed = await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)
        plant = await load_owned_plant(self._plants, owner_id, plant_id)
        ensure_within(GridRect(x, y, 1, 1), bed.grid, "Plant would be outside the bed.")

        placements = await self._placements.list_for_bed(bed_id)
        required = required_cells(plant.spacing_inches, bed.cell_inches)

        conflict = find_spacing_conflict(placements, x, y, required)
        if conflict is not None:
            logger.info(
                f"Placing {plant.name} at ({x},{y}) in bed {bed_id} blocked by "
                f"{conflict.plant_name} at ({conflict.x},{conflict.y}); needs {required} cells"
            )
            raise SpacingConflictError(
                required_cells=required,
                grid_cell_inches=bed.cell_inches,
                placing=plant.name,
                existing=conflict.plant_name,
                conflict_x=conflict.x,
                conflict_y=conflict.y,
            )

        existing = next((p for p in placements if p.x == x and p.y == y), None)
        if existing is not None:
            existing.plant_id = plant.id
            existing.plant_name = plant.name
            existing.plant_spacing_inches = plant.spacing_inches
            placement = await self._placements.update(existing)
            logger.info(f"Replaced plant in bed {bed_id} cell ({x},{y}) with {plant.name}")
        else:
            placement = await self._placements.create(
                BedPlacement(
                    bed_id=bed_id,
                    plant_id=plant.id,
                    x=x,
                    y=y,
                    w=1,
                    h=1,
                    count=1,
                    plant_name=plant.name,
                    plant_spacing_inches=plant.spacing_inches,
                )
            )
            logger.info(f"Placed {plant.name} in bed {bed_id} cell ({x},{y})")
        return placement

    async def clear_cell(self, owner_id: str, bed_id: int, x: Any, y: Any) -> int:
        """
        Remove whatever occupies (x, y). Clearing an empty cell is not an error.

        Returns:
            int: Number of placements removed
        """
        x = coerce_cell_coordinate(x, "x")
        y = coerce_cell_coordinate(y, "y")
        await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)
        removed = await self._placements.delete_at(bed_id, x, y)
        logger.info(f"Cleared bed {bed_id} cell ({x},{y}); removed {removed}")
        return removed

    async def get_blocked_cells(self, owner_id: str, bed_id: int, plant_id: int) -> BlockedCells:
        """Cells where `plant_id` could not currently be placed in the bed."""
        bed = await load_owned_bed(self._beds, owner_id, bed_id)
        plant = await load_owned_plant(self._plants, owner_id, plant_id)
        required = required_cells(plant.spacing_inches, bed.cell_inches)
        placements = await self._placements.list_for_bed(bed_id)
        return BlockedCells(required_cells=required, cells=blocked_cells(placements, bed.grid, required))

    # =========================================================================
    # PLACEMENT LIFECYCLE
    # =========================================================================

    async def get_placement(self, owner_id: str, placement_id: int) -> BedPlacement:
        return await load_owned_placement(self._placements, self._beds, owner_id, placement_id)

    async def update_placement(self, owner_id: str, placement_id: int, **changes: Any) -> BedPlacement:
        """
        Patch lifecycle dates, harvest yield/unit, notes or count.

        Only keys present in `changes` are touched; None clears a field.
        """
        placement = await load_owned_placement(
            self._placements, self._beds, owner_id, placement_id, lock_bed=True
        )

        unknown = set(changes) - set(EDITABLE_PLACEMENT_FIELDS)
        if unknown:
            raise ValidationError(
                f"Cannot update placement fields: {', '.join(sorted(unknown))}",
                constraint="editable_fields",
            )

        if "count" in changes and (changes["count"] is None or changes["count"] < 1):
            raise ValidationError("count must be at least 1.", field="count", value=changes["count"])
        if changes.get("harvest_yield") is not None and changes["harvest_yield"] < 0:
            raise ValidationError(
                "harvestYield cannot be negative.",
                field="harvestYield",
                value=changes["harvest_yield"],
            )

        for key, value in changes.items():
            setattr(placement, key, value)

        return await self._placements.update(placement)

    async def delete_placement(self, owner_id: str, placement_id: int) -> None:
        await load_owned_placement(self._placements, self._beds, owner_id, placement_id, lock_bed=True)
        await self._placements.delete(placement_id)
        logger.info(f"Placement {placement_id} deleted by owner {owner_id}")

    async def archive_placement(
        self,
        owner_id: str,
        placement_id: int,
        today: Optional[date] = None,
    ) -> PlacementHistory:
        """
        Move a finished placement into the bed's history and delete the live row.

        The season comes from the harvest end date, or from today when the
        harvest end was never recorded.
        """
        placement = await load_owned_placement(
            self._placements, self._beds, owner_id, placement_id, lock_bed=True
        )
        season_day = placement.harvest_ended_date or today or date.today()
        season_year, season_name = season_for(season_day)
        plant_name = placement.plant_name or ""

        history = await self._history.create(
            PlacementHistory(
                bed_id=placement.bed_id,
                plant_name=plant_name,
                plant_type=plant_family(plant_name),
                x=placement.x,
                y=placement.y,
                w=placement.w,
                h=placement.h,
                season_year=season_year,
                season_name=season_name,
                harvest_yield=placement.harvest_yield,
                harvest_yield_unit=placement.harvest_yield_unit,
                notes=placement.notes,
            )
        )
        await self._placements.delete(placement_id)
        logger.info(
            f"Placement {placement_id} ({plant_name}) archived to history "
            f"{season_name} {season_year} of bed {placement.bed_id}"
        )
        return history

    # =========================================================================
    # HISTORY / ROTATION
    # =========================================================================

    async def get_bed_history(self, owner_id: str, bed_id: int) -> BedHistory:
        await load_owned_bed(self._beds, owner_id, bed_id)
        history = await self._history.list_for_bed(bed_id)

        by_year: Dict[int, List[PlacementHistory]] = OrderedDict()
        for entry in history:
            by_year.setdefault(entry.season_year, []).append(entry)
        return BedHistory(history=history, by_year=by_year)

    async def check_rotation(
        self,
        owner_id: str,
        bed_id: int,
        plant_id: int,
        x: Any,
        y: Any,
        window_years: Optional[int] = None,
        today: Optional[date] = None,
    ) -> RotationCheck:
        """
        Same-family plantings that covered (x, y) in this bed within the rotation window.
        """
        x = coerce_cell_coordinate(x, "x")
        y = coerce_cell_coordinate(y, "y")
        await load_owned_bed(self._beds, owner_id, bed_id)
        plant = await load_owned_plant(self._plants, owner_id, plant_id)

        family = plant_family(plant.name)
        if family is None:
            return RotationCheck(family=None)

        window = window_years if window_years is not None else self._settings.ROTATION_WINDOW_YEARS
        current_year = (today or date.today()).year

        conflicts = [
            entry
            for entry in await self._history.list_for_bed(bed_id)
            if entry.plant_type == family
            and current_year - entry.season_year < window
            and entry.rect.contains_cell(x, y)
        ]
        return RotationCheck(family=family, conflicts=conflicts)
