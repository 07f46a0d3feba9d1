# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the database tables and the code that reads and writes them for the garden layout.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and repository implementations for the garden layout module.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM and async sessions
# - garden_planner.modules.garden_layout.domain.repositories (interfaces)
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (repository wiring)
# - migrations/env.py (metadata)

from .models import (
    BedModel,
    BedPlacementModel,
    GardenModel,
    GardenYearModel,
    GateModel,
    PlacementHistoryModel,
    PlantModel,
    WalkwayModel,
)
from .bed_repository_impl import BedRepositoryImpl
from .garden_repository_impl import GardenRepositoryImpl, GateRepositoryImpl, WalkwayRepositoryImpl
from .garden_year_repository_impl import GardenYearRepositoryImpl
from .placement_repository_impl import PlacementHistoryRepositoryImpl, PlacementRepositoryImpl
from .plant_repository_impl import PlantRepositoryImpl

__all__ = [
    "BedModel",
    "BedPlacementModel",
    "GardenModel",
    "GardenYearModel",
    "GateModel",
    "PlacementHistoryModel",
    "PlantModel",
    "WalkwayModel",
    "BedRepositoryImpl",
    "GardenRepositoryImpl",
    "GateRepositoryImpl",
    "WalkwayRepositoryImpl",
    "GardenYearRepositoryImpl",
    "PlacementHistoryRepositoryImpl",
    "PlacementRepositoryImpl",
    "PlantRepositoryImpl",
]
