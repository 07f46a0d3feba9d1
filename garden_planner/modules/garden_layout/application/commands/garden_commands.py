# 📄 File: garden_planner/modules/garden_layout/application/commands/garden_commands.py
# 🧭 Purpose (Layman Explanation):
# Commands for the big garden grid: sizing the garden, moving a bed, drawing walkways and gates.
#
# 🧪 Purpose (Technical Summary):
# Pydantic commands consumed by GardenCommandHandler. Bed and feature coordinates are
# Optional[float] so null (detach) and non-integral values reach the domain validator.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - application.handlers.command_handlers.GardenCommandHandler
# - presentation.api.v1.garden, beds, walkways_gates

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class UpsertGardenCommand(BaseModel):
    """Create or resize the owner's garden."""

    owner_id: str
    width_inches: int = Field(..., description="Garden width in inches")
    height_inches: int = Field(..., description="Garden height in inches")
    cell_inches: Optional[int] = Field(default=None, description="Garden grid pitch (6 or 12)")


class PositionBedCommand(BaseModel):
    """
    Move a bed on the garden grid.

    Either coordinate set to None removes the bed from the garden.
    """

    owner_id: str
    bed_id: int
    garden_x: Optional[float] = None
    garden_y: Optional[float] = None

    @property
    def is_detach(self) -> bool:
        return self.garden_x is None or self.garden_y is None


class CreateWalkwayCommand(BaseModel):
    owner_id: str
    x: float
    y: float
    width: float = 1
    height: float = 1
    name: Optional[str] = None


class UpdateWalkwayCommand(BaseModel):
    """Partial walkway update; only keys present in `changes` are applied."""

    owner_id: str
    walkway_id: int
    changes: Dict[str, Any] = Field(default_factory=dict)


class CreateGateCommand(BaseModel):
    owner_id: str
    x: float
    y: float
    width: float = 1
    side: Optional[str] = Field(default=None, description="top, right, bottom or left")
    name: Optional[str] = None
