# 📄 File: garden_planner/modules/garden_layout/domain/services/garden_layout_service.py
# 🧭 Purpose (Layman Explanation):
# Runs everything that happens on the big garden grid: setting the garden size, moving beds
# around, turning them sideways, and drawing walkways and gates.
# 🧪 Purpose (Technical Summary):
# Garden-scale domain service. Loads a consistent snapshot (garden row locked, other placed
# beds read), runs the pure layout validator, and mutates exactly one record on success.
# 🔗 Dependencies:
# garden/bed/walkway/gate repositories, layout_validator, grid primitives, settings
# 🔄 Connected Modules / Calls From:
# application.handlers (garden and bed command handlers, garden layout query)

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.exceptions import (
    GardenPlannerException,
    NotFoundError,
    ValidationError,
)

from ..models.bed import Bed
from ..models.garden import Garden, Gate, GateSide, Walkway
from ..repositories.bed_repository import BedRepository
from ..repositories.garden_repository import GardenRepository, GateRepository, WalkwayRepository
from .grid import GridRect
from .layout_validator import (
    coerce_cell_coordinate,
    ensure_within,
    require_garden,
    validate_bed_position,
)
from .ownership import check_owner, load_owned_bed

logger = logging.getLogger(__name__)


@dataclass
class GardenLayout:
    """Everything drawn on the garden grid for one owner."""
    garden: Optional[Garden]
    placed_beds: List[Tuple[Bed, GridRect]] = field(default_factory=list)
    unplaced_beds: List[Bed] = field(default_factory=list)
    walkways: List[Walkway] = field(default_factory=list)
    gates: List[Gate] = field(default_factory=list)


class GardenLayoutService:
    """
    Domain service for the garden grid.

    Bed positioning locks the owner's garden row first, so two moves by the same
    owner cannot both pass validation against a stale snapshot.
    """

    def __init__(
        self,
        garden_repository: GardenRepository,
        bed_repository: BedRepository,
        walkway_repository: WalkwayRepository,
        gate_repository: GateRepository,
        settings: Optional[Settings] = None,
    ):
        self._gardens = garden_repository
        self._beds = bed_repository
        self._walkways = walkway_repository
        self._gates = gate_repository
        self._settings = settings or get_settings()

    # =========================================================================
    # GARDEN
    # =========================================================================

    async def get_garden(self, owner_id: str) -> Optional[Garden]:
        return await self._gardens.get_by_owner(owner_id)

    async def upsert_garden(
        self,
        owner_id: str,
        width_inches: int,
        height_inches: int,
        cell_inches: Optional[int] = None,
    ) -> Garden:
        """
        Create the owner's garden or resize the existing one.

        Args:
            owner_id: Opaque owner id
            width_inches: Garden width, at least MIN_GARDEN_DIMENSION_INCHES
            height_inches: Garden height, at least MIN_GARDEN_DIMENSION_INCHES
            cell_inches: Grid pitch, one of GARDEN_CELL_INCHES_CHOICES

        Returns:
            Garden: Saved garden

        Raises:
            ValidationError: Dimensions too small or unsupported cell size
        """
        minimum = self._settings.MIN_GARDEN_DIMENSION_INCHES
        for name, value in (("widthInches", width_inches), ("heightInches", height_inches)):
            if value < minimum:
                raise ValidationError(
                    f"{name} must be at least {minimum}.",
                    field=name,
                    value=value,
                    constraint=f">={minimum}",
                )

        if cell_inches is None:
            cell_inches = self._settings.DEFAULT_GARDEN_CELL_INCHES
        choices = self._settings.garden_cell_choices
        if cell_inches not in choices:
            raise ValidationError(
                f"cellInches must be one of {choices}.",
                field="cellInches",
                value=cell_inches,
                constraint="choices",
            )

        existing = await self._gardens.get_by_owner(owner_id, for_update=True)
        garden = Garden(
            id=existing.id if existing else None,
            owner_id=owner_id,
            width_inches=width_inches,
            height_inches=height_inches,
            cell_inches=cell_inches,
            created_at=existing.created_at if existing else None,
        )
        saved = await self._gardens.save(garden)
        logger.info(
            f"Garden for owner {owner_id} set to {width_inches}x{height_inches}in "
            f"@ {cell_inches}in ({saved.cols}x{saved.rows} cells)"
        )
        return saved

    async def get_layout(self, owner_id: str) -> GardenLayout:
        garden = await self._gardens.get_by_owner(owner_id)
        layout = GardenLayout(
            garden=garden,
            walkways=await self._walkways.list_for_owner(owner_id),
            gates=await self._gates.list_for_owner(owner_id),
        )
        for bed in await self._beds.list_for_owner(owner_id):
            rect = bed.garden_rect(garden.cell_inches) if garden else None
            if rect is None:
                layout.unplaced_beds.append(bed)
            else:
                layout.placed_beds.append((bed, rect))
        return layout

    # =========================================================================
    # BED POSITIONING
    # =========================================================================

    async def position_bed(self, owner_id: str, bed_id: int, garden_x: Any, garden_y: Any) -> Bed:
        """
        Move a bed to a garden cell, or detach it when either coordinate is None.

        Raises:
            NotFoundError / AccessDeniedError: Bed missing or foreign
            ValidationError: Non-finite or fractional coordinates
            ConfigurationError: Garden not set up
            OutOfBoundsError: Bed would leave the garden
            OverlapError: Bed would collide with another placed bed
        """
        if garden_x is None or garden_y is None:
            bed = await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)
            bed.garden_x = None
            bed.garden_y = None
            updated = await self._beds.update(bed)
            logger.info(f"Bed {bed_id} removed from garden by owner {owner_id}")
            return updated

        x = coerce_cell_coordinate(garden_x, "gardenX")
        y = coerce_cell_coordinate(garden_y, "gardenY")

        garden = require_garden(await self._gardens.get_by_owner(owner_id, for_update=True))
        bed = await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)
        others = await self._beds.list_placed_for_owner(owner_id, exclude_bed_id=bed.id)

        try:
            rect = validate_bed_position(bed, x, y, garden, others)
        except GardenPlannerException as e:
            logger.info(f"Bed {bed_id} position ({x},{y}) rejected: {e.message}")
            raise

        bed.garden_x = rect.x
        bed.garden_y = rect.y
        updated = await self._beds.update(bed)
        logger.info(f"Bed {bed_id} positioned at ({rect.x},{rect.y}) size {rect.w}x{rect.h}")
        return updated

    async def rotate_bed(self, owner_id: str, bed_id: int, rotated: bool) -> Bed:
        """
        Set a bed's garden rotation; a placed bed is re-validated at its current origin.

        Raises:
            OutOfBoundsError / OverlapError: Rotated footprint does not fit
        """
        garden = await self._gardens.get_by_owner(owner_id, for_update=True)
        bed = await load_owned_bed(self._beds, owner_id, bed_id, for_update=True)

        if bed.garden_rotated == rotated:
            return bed

        if bed.is_placed and garden is not None:
            others = await self._beds.list_placed_for_owner(owner_id, exclude_bed_id=bed.id)
            validate_bed_position(bed, bed.garden_x, bed.garden_y, garden, others, rotated=rotated)

        bed.garden_rotated = rotated
        updated = await self._beds.update(bed)
        logger.info(f"Bed {bed_id} rotation set to {rotated}")
        return updated

    # =========================================================================
    # WALKWAYS
    # =========================================================================

    async def list_walkways(self, owner_id: str) -> List[Walkway]:
        return await self._walkways.list_for_owner(owner_id)

    async def create_walkway(
        self,
        owner_id: str,
        x: Any,
        y: Any,
        width: int,
        height: int,
        name: Optional[str] = None,
    ) -> Walkway:
        walkway = Walkway(
            owner_id=owner_id,
            name=name,
            x=coerce_cell_coordinate(x, "x"),
            y=coerce_cell_coordinate(y, "y"),
            width=self._require_span(width, "width"),
            height=self._require_span(height, "height"),
        )
        await self._ensure_on_garden(owner_id, walkway.rect, "Walkway would be outside the garden bounds.")
        created = await self._walkways.create(walkway)
        logger.info(f"Walkway {created.id} created for owner {owner_id}")
        return created

    async def update_walkway(self, owner_id: str, walkway_id: int, **changes: Any) -> Walkway:
        walkway = await self._load_owned_walkway(owner_id, walkway_id)

        if "x" in changes:
            walkway.x = coerce_cell_coordinate(changes["x"], "x")
        if "y" in changes:
            walkway.y = coerce_cell_coordinate(changes["y"], "y")
        if "width" in changes:
            walkway.width = self._require_span(changes["width"], "width")
        if "height" in changes:
            walkway.height = self._require_span(changes["height"], "height")
        if "name" in changes:
            walkway.name = changes["name"]

        await self._ensure_on_garden(owner_id, walkway.rect, "Walkway would be outside the garden bounds.")
        return await self._walkways.update(walkway)

    async def delete_walkway(self, owner_id: str, walkway_id: int) -> None:
        await self._load_owned_walkway(owner_id, walkway_id)
        await self._walkways.delete(walkway_id)
        logger.info(f"Walkway {walkway_id} deleted by owner {owner_id}")

    # =========================================================================
    # GATES
    # =========================================================================

    async def list_gates(self, owner_id: str) -> List[Gate]:
        return await self._gates.list_for_owner(owner_id)

    async def create_gate(
        self,
        owner_id: str,
        x: Any,
        y: Any,
        side: Optional[str] = None,
        width: int = 1,
        name: Optional[str] = None,
    ) -> Gate:
        try:
            gate_side = GateSide(side) if side is not None else GateSide.BOTTOM
        except ValueError:
            raise ValidationError(
                "side must be one of top, right, bottom, left.",
                field="side",
                value=side,
                constraint="choices",
            )

        gate = Gate(
            owner_id=owner_id,
            name=name,
            x=coerce_cell_coordinate(x, "x"),
            y=coerce_cell_coordinate(y, "y"),
            width=self._require_span(width, "width"),
            side=gate_side,
        )
        await self._ensure_on_garden(owner_id, gate.rect, "Gate would be outside the garden bounds.")
        created = await self._gates.create(gate)
        logger.info(f"Gate {created.id} created on {gate_side.value} side for owner {owner_id}")
        return created

    async def delete_gate(self, owner_id: str, gate_id: int) -> None:
        gate = await self._gates.get_by_id(gate_id)
        if gate is None:
            raise NotFoundError("Gate not found", resource_type="gate", resource_id=gate_id)
        check_owner(gate.owner_id, owner_id, "gate", gate_id)
        await self._gates.delete(gate_id)
        logger.info(f"Gate {gate_id} deleted by owner {owner_id}")

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _load_owned_walkway(self, owner_id: str, walkway_id: int) -> Walkway:
        walkway = await self._walkways.get_by_id(walkway_id)
        if walkway is None:
            raise NotFoundError("Walkway not found", resource_type="walkway", resource_id=walkway_id)
        check_owner(walkway.owner_id, owner_id, "walkway", walkway_id)
        return walkway

    async def _ensure_on_garden(self, owner_id: str, rect: GridRect, message: str) -> None:
        # Walkways and gates may be drawn before the garden exists; bounds apply once it does
        garden = await self._gardens.get_by_owner(owner_id)
        if garden is not None:
            ensure_within(rect, garden.grid, message)

    @staticmethod
    def _require_span(value: Any, field_name: str) -> int:
        span = coerce_cell_coordinate(value, field_name)
        if span < 1:
            raise ValidationError(
                f"{field_name} must be at least 1.",
                field=field_name,
                value=value,
                constraint=">=1",
            )
        return span
