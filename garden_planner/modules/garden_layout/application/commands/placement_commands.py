# 📄 File: garden_planner/modules/garden_layout/application/commands/placement_commands.py
# 🧭 Purpose (Layman Explanation):
# Commands for putting a plant in a bed square, emptying a square, and recording how a
# planting is going.
#
# 🧪 Purpose (Technical Summary):
# Pydantic commands for bed-scale writes consumed by PlantingCommandHandler.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - application.handlers.command_handlers.PlantingCommandHandler
# - presentation.api.v1.beds, placements

from typing import Any, Dict

from pydantic import BaseModel, Field


class PlacePlantCommand(BaseModel):
    owner_id: str
    bed_id: int
    plant_id: int
    x: float
    y: float


class ClearCellCommand(BaseModel):
    owner_id: str
    bed_id: int
    x: float
    y: float


class UpdatePlacementCommand(BaseModel):
    """Lifecycle dates, yield, notes or count; only keys present in `changes` are applied."""

    owner_id: str
    placement_id: int
    changes: Dict[str, Any] = Field(default_factory=dict)
