from .garden import Garden, Gate, GateSide, Walkway
from .bed import Bed
from .plant import Plant
from .placement import BedPlacement, PlacementHistory, LIFECYCLE_DATE_FIELDS
from .garden_year import ArchivedBed, ArchivedPlacement, GardenYear, RestoreReport

__all__ = [
    "Garden",
    "Gate",
    "GateSide",
    "Walkway",
    "Bed",
    "Plant",
    "BedPlacement",
    "PlacementHistory",
    "LIFECYCLE_DATE_FIELDS",
    "ArchivedBed",
    "ArchivedPlacement",
    "GardenYear",
    "RestoreReport",
]
