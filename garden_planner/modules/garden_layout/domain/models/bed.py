# 📄 File: garden_planner/modules/garden_layout/domain/models/bed.py
# 🧭 Purpose (Layman Explanation):
# Describes a garden bed: its physical size, the size of the squares plants go in,
# and where (if anywhere) it sits in the garden.
# 🧪 Purpose (Technical Summary):
# Bed domain entity carrying its own bed-grid pitch and optional garden-grid origin,
# with helpers projecting its footprint into garden cells (rotation aware).
# 🔗 Dependencies:
# pydantic, datetime, typing, grid primitives
# 🔄 Connected Modules / Calls From:
# layout_validator.py, bed_service.py, bed_planting_service.py, garden_archive_service.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..services.grid import GridRect, GridSize, footprint_cells, grid_size


class Bed(BaseModel):
    """
    A bed owned by one user.

    garden_x/garden_y are garden-grid cell coordinates; both None means the bed
    is not placed on the garden. garden_rotated swaps width and height when the
    bed is projected onto the garden grid.
    """

    id: Optional[int] = None
    owner_id: str
    name: str = Field(..., min_length=1, max_length=200)
    width_inches: int = Field(..., gt=0)
    height_inches: int = Field(..., gt=0)
    cell_inches: int = Field(..., gt=0)
    garden_x: Optional[int] = None
    garden_y: Optional[int] = None
    garden_rotated: bool = False
    micro_climate: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_placed(self) -> bool:
        return self.garden_x is not None and self.garden_y is not None

    @property
    def grid(self) -> GridSize:
        """The bed's own planting grid."""
        return grid_size(self.width_inches, self.height_inches, self.cell_inches)

    def footprint(self, garden_cell_inches: int, rotated: Optional[bool] = None) -> GridSize:
        """Garden cells covered by this bed, optionally for a hypothetical rotation."""
        return footprint_cells(
            self.width_inches,
            self.height_inches,
            self.garden_rotated if rotated is None else rotated,
            garden_cell_inches,
        )

    def garden_rect(self, garden_cell_inches: int) -> Optional[GridRect]:
        """Placed rectangle on the garden grid, or None when unplaced."""
        if not self.is_placed:
            return None
        size = self.footprint(garden_cell_inches)
        return GridRect(self.garden_x, self.garden_y, size.w, size.h)
