# 📄 File: garden_planner/modules/garden_layout/domain/services/layout_validator.py
# 🧭 Purpose (Layman Explanation):
# Decides whether a bed can sit at a spot in the garden: the spot must be a real grid square,
# the bed must fit inside the garden, and it must not bump into another bed.
# 🧪 Purpose (Technical Summary):
# Pure garden-scale placement validator. Checks coordinate sanity, garden existence, grid
# bounds and axis-aligned overlap against the other placed beds, raising the matching
# domain exception before any mutation happens.
# 🔗 Dependencies:
# math, grid primitives, domain models, shared exceptions
# 🔄 Connected Modules / Calls From:
# garden_layout_service.py (position/rotate bed, walkways, gates)

import math
from typing import Any, Iterable, Optional

from garden_planner.shared.core.exceptions import (
    ConfigurationError,
    OutOfBoundsError,
    OverlapError,
    ValidationError,
)

from ..models.bed import Bed
from ..models.garden import Garden
from .grid import GridRect, GridSize


def coerce_cell_coordinate(value: Any, field: str) -> int:
    """
    Turn a requested coordinate into an integer cell index.

    Accepts ints and integral floats (3.0); rejects booleans, NaN, infinities,
    fractional values and anything non-numeric.

    Raises:
        ValidationError: If the value is not a finite whole number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field} must be a number.",
            field=field,
            value=value,
            constraint="finite_number",
        )
    if not math.isfinite(value):
        raise ValidationError(
            f"{field} must be a finite number.",
            field=field,
            value=value,
            constraint="finite_number",
        )
    if value != int(value):
        raise ValidationError(
            f"{field} must be a whole number of cells.",
            field=field,
            value=value,
            constraint="integer",
        )
    return int(value)


def require_garden(garden: Optional[Garden]) -> Garden:
    """Raise ConfigurationError when the owner has not set up a garden yet."""
    if garden is None:
        raise ConfigurationError("Garden not set up yet.")
    return garden


def ensure_within(rect: GridRect, grid: GridSize, message: str) -> None:
    """Raise OutOfBoundsError unless rect lies inside [0, cols) x [0, rows)."""
    if not rect.fits_within(grid):
        raise OutOfBoundsError(
            message,
            x=rect.x,
            y=rect.y,
            w=rect.w,
            h=rect.h,
            cols=grid.cols,
            rows=grid.rows,
        )


def find_overlapping_bed(
    rect: GridRect,
    other_beds: Iterable[Bed],
    garden_cell_inches: int,
    exclude_bed_id: Optional[int] = None,
) -> Optional[Bed]:
    """
    First placed bed whose garden footprint overlaps rect, in iteration order.

    Unplaced beds and the bed being moved are ignored.
    """
    for other in other_beds:
        if exclude_bed_id is not None and other.id == exclude_bed_id:
            continue
        other_rect = other.garden_rect(garden_cell_inches)
        if other_rect is not None and rect.overlaps(other_rect):
            return other
    return None


def validate_bed_position(
    bed: Bed,
    garden_x: Any,
    garden_y: Any,
    garden: Optional[Garden],
    other_beds: Iterable[Bed],
    rotated: Optional[bool] = None,
) -> GridRect:
    """
    Decide whether `bed` may occupy the garden cell (garden_x, garden_y).

    Detaching (null coordinates) is not handled here; callers short-circuit it.

    Args:
        bed: Bed being positioned
        garden_x: Requested top-left column
        garden_y: Requested top-left row
        garden: Owner's garden, or None when not set up
        other_beds: Owner's other placed beds (a consistent snapshot)
        rotated: Rotation to validate with, defaults to the bed's current rotation

    Returns:
        GridRect: Validated footprint rectangle on the garden grid

    Raises:
        ValidationError: Non-finite or fractional coordinates
        ConfigurationError: Garden not set up
        OutOfBoundsError: Footprint leaves the garden grid
        OverlapError: Footprint collides with another placed bed
    """
    x = coerce_cell_coordinate(garden_x, "gardenX")
    y = coerce_cell_coordinate(garden_y, "gardenY")
    garden = require_garden(garden)

    size = bed.footprint(garden.cell_inches, rotated=rotated)
    rect = GridRect(x, y, size.w, size.h)

    ensure_within(rect, garden.grid, "Bed would be outside the garden bounds.")

    conflict = find_overlapping_bed(rect, other_beds, garden.cell_inches, exclude_bed_id=bed.id)
    if conflict is not None:
        raise OverlapError(conflict.name, conflicting_bed_id=conflict.id)

    return rect
