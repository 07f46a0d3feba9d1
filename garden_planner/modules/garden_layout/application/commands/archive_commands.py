# 📄 File: garden_planner/modules/garden_layout/application/commands/archive_commands.py
# 🧭 Purpose (Layman Explanation):
# Commands for saving this year's garden and for rebuilding a garden from a past year.
#
# 🧪 Purpose (Technical Summary):
# Pydantic commands for GardenArchiveService archive and restore operations.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - application.handlers.command_handlers.ArchiveCommandHandler
# - presentation.api.v1.garden_years

from typing import Optional

from pydantic import BaseModel


class ArchiveYearCommand(BaseModel):
    owner_id: str
    year: Optional[int] = None
    name: Optional[str] = None
    notes: Optional[str] = None


class RestoreYearCommand(BaseModel):
    owner_id: str
    year: int
    restore_layout: bool = True
    restore_placements: bool = True
