# 📄 File: garden_planner/modules/garden_layout/domain/models/garden_year.py
# 🧭 Purpose (Layman Explanation):
# A yearly "photo" of the whole garden: every bed and every plant in it, kept so a
# later season can start from the same layout.
# 🧪 Purpose (Technical Summary):
# GardenYear archive entity with typed snapshot documents (ArchivedBed/ArchivedPlacement)
# and the RestoreReport returned by replaying a snapshot.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# garden_archive_service.py, garden_year_repository.py, archive API schemas

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ArchivedPlacement(BaseModel):
    """Placement as captured in an archive; plant referenced by name only."""

    x: int
    y: int
    w: int = 1
    h: int = 1
    count: int = 1
    plant_name: str
    plant_spacing: Optional[int] = None
    seeds_started_date: Optional[date] = None
    transplanted_date: Optional[date] = None
    direct_sowed_date: Optional[date] = None
    harvest_started_date: Optional[date] = None
    harvest_ended_date: Optional[date] = None
    harvest_yield: Optional[float] = None
    harvest_yield_unit: Optional[str] = None


class ArchivedBed(BaseModel):
    """Bed as captured in an archive, with its placements."""

    id: Optional[int] = None
    name: str
    width_inches: int
    height_inches: int
    cell_inches: int
    garden_x: Optional[int] = None
    garden_y: Optional[int] = None
    garden_rotated: bool = False
    micro_climate: Optional[str] = None
    placements: List[ArchivedPlacement] = Field(default_factory=list)


class GardenYear(BaseModel):
    """Append-only yearly snapshot; unique per (owner_id, year)."""

    id: Optional[int] = None
    owner_id: str
    year: int
    name: str
    garden_snapshot: Optional[Dict[str, Any]] = None
    beds_snapshot: List[ArchivedBed] = Field(default_factory=list)
    total_beds: int = 0
    total_placements: int = 0
    total_harvest: Optional[float] = None
    harvest_unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class RestoreReport(BaseModel):
    """Outcome of replaying an archive into the live garden."""

    year: int
    beds_created: int = 0
    beds_updated: int = 0
    placements_created: int = 0
    plants_not_found: List[str] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Restored from {self.year}"
