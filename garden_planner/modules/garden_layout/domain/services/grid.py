# 📄 File: garden_planner/modules/garden_layout/domain/services/grid.py
# 🧭 Purpose (Layman Explanation):
# Turns real-world inches into grid squares, so we know how many squares a garden or bed has
# and how many garden squares a bed covers.
# 🧪 Purpose (Technical Summary):
# Pure unit/grid conversion and axis-aligned rectangle primitives shared by the garden-scale
# and bed-scale validators. Grid counts round down, footprints round up.
# 🔗 Dependencies:
# math, dataclasses
# 🔄 Connected Modules / Calls From:
# layout_validator.py, spacing_validator.py, domain models (grid properties), garden layout query

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class GridSize:
    """Integer width/height in cells (cols/rows for a grid, w/h for a footprint)."""
    w: int
    h: int

    @property
    def cols(self) -> int:
        return self.w

    @property
    def rows(self) -> int:
        return self.h


@dataclass(frozen=True)
class GridRect:
    """Axis-aligned rectangle in cell units, top-left origin."""
    x: int
    y: int
    w: int
    h: int

    def overlaps(self, other: "GridRect") -> bool:
        """
        Half-open overlap test; rectangles that only share an edge do not overlap.
        """
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )

    def fits_within(self, grid: GridSize) -> bool:
        """True when the rectangle lies entirely inside [0, cols) x [0, rows)."""
        return (
            self.x >= 0
            and self.y >= 0
            and self.x + self.w <= grid.cols
            and self.y + self.h <= grid.rows
        )

    def contains_cell(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


def cells_for(inches: Number, cell_inches: Number) -> int:
    """
    Number of whole cells along one side of a grid.

    A partial trailing cell is unusable, so this floors; at least one cell.
    """
    return max(1, math.floor(inches / cell_inches))


def grid_size(width_inches: Number, height_inches: Number, cell_inches: Number) -> GridSize:
    """Column/row count for a garden or a bed."""
    return GridSize(
        w=cells_for(width_inches, cell_inches),
        h=cells_for(height_inches, cell_inches),
    )


def footprint_cells(
    width_inches: Number,
    height_inches: Number,
    rotated: bool,
    cell_inches: Number,
) -> GridSize:
    """
    Cells a bed covers on the garden grid.

    Rotation swaps the bed's width and height. A bed partially covering a garden
    cell still occupies it, so this ceils.
    """
    effective_w = height_inches if rotated else width_inches
    effective_h = width_inches if rotated else height_inches
    return GridSize(
        w=max(1, math.ceil(effective_w / cell_inches)),
        h=max(1, math.ceil(effective_h / cell_inches)),
    )
