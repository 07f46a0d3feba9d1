# 📄 File: garden_planner/modules/garden_layout/domain/models/garden.py
# 🧭 Purpose (Layman Explanation):
# Describes a user's garden (its size and grid square size) plus the walkways and gates
# drawn onto it.
# 🧪 Purpose (Technical Summary):
# Domain models for the garden-scale grid: Garden (one per owner), Walkway and Gate
# rectangles that live on the garden grid but carry no plants.
# 🔗 Dependencies:
# pydantic, datetime, typing, grid primitives
# 🔄 Connected Modules / Calls From:
# garden_layout_service.py, garden_repository.py, archive snapshots, API schemas

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..services.grid import GridRect, GridSize, grid_size


class Garden(BaseModel):
    """
    The user's garden: one coarse grid that whole beds are laid out on.

    Invariant: cell_inches > 0; cols = floor(width/cell) and rows = floor(height/cell),
    each at least 1.
    """

    id: Optional[int] = None
    owner_id: str
    width_inches: int = Field(..., gt=0)
    height_inches: int = Field(..., gt=0)
    cell_inches: int = Field(..., gt=0)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def grid(self) -> GridSize:
        return grid_size(self.width_inches, self.height_inches, self.cell_inches)

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows


class GateSide(str, Enum):
    """Garden edge a gate sits on."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Walkway(BaseModel):
    """A rectangular path on the garden grid (cell units)."""

    id: Optional[int] = None
    owner_id: str
    name: Optional[str] = None
    x: int
    y: int
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def rect(self) -> GridRect:
        return GridRect(self.x, self.y, self.width, self.height)


class Gate(BaseModel):
    """An opening on one side of the garden, `width` cells wide."""

    id: Optional[int] = None
    owner_id: str
    name: Optional[str] = None
    x: int
    y: int
    width: int = Field(1, ge=1)
    side: GateSide = GateSide.BOTTOM
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def rect(self) -> GridRect:
        # Top/bottom gates run along x, left/right gates run along y
        if self.side in (GateSide.TOP, GateSide.BOTTOM):
            return GridRect(self.x, self.y, self.width, 1)
        return GridRect(self.x, self.y, 1, self.width)
