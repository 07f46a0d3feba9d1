# 📄 File: garden_planner/modules/garden_layout/domain/services/spacing_validator.py
# 🧭 Purpose (Layman Explanation):
# Decides whether a plant can go into a bed square without being too close to the plants
# already there, based on how much room the new plant needs.
# 🧪 Purpose (Technical Summary):
# Pure bed-scale spacing rules: inches-to-cells conversion of the required spacing and a
# square (Chebyshev) exclusion zone around every other occupant. Replacing the occupant of
# the target cell itself is never blocked.
# 🔗 Dependencies:
# math, typing, BedPlacement model
# 🔄 Connected Modules / Calls From:
# bed_planting_service.py (place plant, blocked cells query)

import math
from typing import Iterable, Optional, Set, Tuple

from ..models.placement import BedPlacement
from .grid import GridSize

Cell = Tuple[int, int]


def required_cells(spacing_inches: float, cell_inches: float) -> int:
    """Minimum cell distance a plant must keep from every other plant (at least 1)."""
    return max(1, math.ceil(spacing_inches / cell_inches))


def is_blocked_by(placement: BedPlacement, x: int, y: int, required: int) -> bool:
    """
    Square-radius rule: blocked when both axis distances are below `required`.

    The occupant of (x, y) itself never blocks; placing there is a replace.
    """
    if placement.x == x and placement.y == y:
        return False
    return abs(placement.x - x) < required and abs(placement.y - y) < required


def find_spacing_conflict(
    placements: Iterable[BedPlacement],
    x: int,
    y: int,
    required: int,
) -> Optional[BedPlacement]:
    """First existing placement that blocks (x, y), or None when the cell is free to use."""
    for placement in placements:
        if is_blocked_by(placement, x, y, required):
            return placement
    return None


def blocked_cells(
    placements: Iterable[BedPlacement],
    grid: GridSize,
    required: int,
) -> Set[Cell]:
    """
    Every bed cell a plant needing `required` cells could not be placed on.

    Occupied cells are not included on their own account (they can be replaced),
    only if a *different* placement blocks them.
    """
    blocked: Set[Cell] = set()
    reach = required - 1
    for placement in placements:
        for y in range(max(0, placement.y - reach), min(grid.rows, placement.y + reach + 1)):
            for x in range(max(0, placement.x - reach), min(grid.cols, placement.x + reach + 1)):
                if (x, y) != (placement.x, placement.y):
                    blocked.add((x, y))
    return blocked
