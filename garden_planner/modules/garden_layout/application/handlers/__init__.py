# 📄 File: garden_planner/modules/garden_layout/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that take a gardener's request and get it done by the right garden service.
#
# 🧪 Purpose (Technical Summary):
# CQRS command and query handlers for the garden layout module.
#
# 🔗 Dependencies:
# - application.commands, domain.services
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies

from .command_handlers import (
    ArchiveCommandHandler,
    BedCommandHandler,
    GardenCommandHandler,
    PlantCommandHandler,
    PlantingCommandHandler,
)
from .query_handlers import (
    ArchiveQueryHandler,
    BedQueryHandler,
    GardenQueryHandler,
    PlacementQueryHandler,
    PlantQueryHandler,
)

__all__ = [
    "ArchiveCommandHandler",
    "BedCommandHandler",
    "GardenCommandHandler",
    "PlantCommandHandler",
    "PlantingCommandHandler",
    "ArchiveQueryHandler",
    "BedQueryHandler",
    "GardenQueryHandler",
    "PlacementQueryHandler",
    "PlantQueryHandler",
]
