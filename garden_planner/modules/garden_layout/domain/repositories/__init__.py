from .garden_repository import GardenRepository, WalkwayRepository, GateRepository
from .bed_repository import BedRepository
from .placement_repository import PlacementRepository, PlacementHistoryRepository
from .plant_repository import PlantRepository
from .garden_year_repository import GardenYearRepository

__all__ = [
    "GardenRepository",
    "WalkwayRepository",
    "GateRepository",
    "BedRepository",
    "PlacementRepository",
    "PlacementHistoryRepository",
    "PlantRepository",
    "GardenYearRepository",
]
