# 📄 File: garden_planner/modules/garden_layout/domain/models/placement.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant sitting in a bed square (with its growing timeline and harvest),
# and the permanent record kept once that planting is finished.
# 🧪 Purpose (Technical Summary):
# BedPlacement (live occupancy of bed-grid cells, unique per bed/x/y) and
# PlacementHistory (immutable, denormalized snapshot of a completed placement).
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# spacing_validator.py, bed_planting_service.py, garden_archive_service.py, placement repositories

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..services.grid import GridRect

LIFECYCLE_DATE_FIELDS = (
    "seeds_started_date",
    "transplanted_date",
    "direct_sowed_date",
    "harvest_started_date",
    "harvest_ended_date",
)


class BedPlacement(BaseModel):
    """
    One plant occupying a w x h block of a bed's grid, top-left at (x, y).

    plant_name / plant_spacing_inches are read-side conveniences joined from
    the plant catalog; they are never written back.
    """

    id: Optional[int] = None
    bed_id: int
    plant_id: int
    x: int
    y: int
    w: int = Field(1, ge=1)
    h: int = Field(1, ge=1)
    count: int = Field(1, ge=1)

    seeds_started_date: Optional[date] = None
    transplanted_date: Optional[date] = None
    direct_sowed_date: Optional[date] = None
    harvest_started_date: Optional[date] = None
    harvest_ended_date: Optional[date] = None

    harvest_yield: Optional[float] = Field(None, ge=0)
    harvest_yield_unit: Optional[str] = None
    notes: Optional[str] = None

    plant_name: Optional[str] = None
    plant_spacing_inches: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def rect(self) -> GridRect:
        return GridRect(self.x, self.y, self.w, self.h)

    @property
    def status(self) -> str:
        """Where the planting is in its season, derived from the latest date set."""
        if self.harvest_ended_date:
            return "harvested"
        if self.harvest_started_date:
            return "harvesting"
        if self.transplanted_date or self.direct_sowed_date:
            return "growing"
        if self.seeds_started_date:
            return "started"
        return "planned"


class PlacementHistory(BaseModel):
    """Immutable record of a completed placement, keyed by bed and season."""

    id: Optional[int] = None
    bed_id: int
    plant_name: str
    plant_type: Optional[str] = None
    x: int
    y: int
    w: int = 1
    h: int = 1
    season_year: int
    season_name: str
    harvest_yield: Optional[float] = None
    harvest_yield_unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def rect(self) -> GridRect:
        return GridRect(self.x, self.y, self.w, self.h)
