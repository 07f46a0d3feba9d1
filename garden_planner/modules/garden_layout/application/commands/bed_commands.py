# 📄 File: garden_planner/modules/garden_layout/application/commands/bed_commands.py
# 🧭 Purpose (Layman Explanation):
# Commands for making and editing beds, and for adding plants to the catalog.
#
# 🧪 Purpose (Technical Summary):
# Pydantic commands for bed lifecycle and the plant catalog. Missing dimensions fall back
# to configured defaults inside the domain services.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - application.handlers.command_handlers (BedCommandHandler, PlantCommandHandler)

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class CreateBedCommand(BaseModel):
    owner_id: str
    name: str
    width_inches: Optional[int] = None
    height_inches: Optional[int] = None
    cell_inches: Optional[int] = None
    micro_climate: Optional[str] = None


class UpdateBedCommand(BaseModel):
    """
    Partial bed update.

    `changes` may hold name, micro_climate and garden_rotated; rotation is
    re-validated against the garden when the bed is placed.
    """

    owner_id: str
    bed_id: int
    changes: Dict[str, Any] = Field(default_factory=dict)


class CreatePlantCommand(BaseModel):
    owner_id: str
    name: str
    spacing_inches: Optional[int] = None
    days_to_maturity_min: Optional[int] = None
    days_to_maturity_max: Optional[int] = None
    notes: Optional[str] = None
