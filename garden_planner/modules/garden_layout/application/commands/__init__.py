# 📄 File: garden_planner/modules/garden_layout/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Every change a gardener can make to their layout, written down as a command.
#
# 🧪 Purpose (Technical Summary):
# CQRS write-side commands. Coordinates stay loosely typed (numbers) so the domain
# validator decides integrality and finiteness.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - application.handlers.command_handlers
# - presentation.api.v1 routers

from .garden_commands import (
    CreateGateCommand,
    CreateWalkwayCommand,
    PositionBedCommand,
    UpdateWalkwayCommand,
    UpsertGardenCommand,
)
from .bed_commands import CreateBedCommand, CreatePlantCommand, UpdateBedCommand
from .placement_commands import ClearCellCommand, PlacePlantCommand, UpdatePlacementCommand
from .archive_commands import ArchiveYearCommand, RestoreYearCommand

__all__ = [
    "CreateGateCommand",
    "CreateWalkwayCommand",
    "PositionBedCommand",
    "UpdateWalkwayCommand",
    "UpsertGardenCommand",
    "CreateBedCommand",
    "CreatePlantCommand",
    "UpdateBedCommand",
    "ClearCellCommand",
    "PlacePlantCommand",
    "UpdatePlacementCommand",
    "ArchiveYearCommand",
    "RestoreYearCommand",
]
