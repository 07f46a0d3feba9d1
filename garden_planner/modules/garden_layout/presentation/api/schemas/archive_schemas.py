# 📄 File: garden_planner/modules/garden_layout/presentation/api/schemas/archive_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends and gets back when saving a year's garden or rebuilding
# the garden from an earlier year.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for garden-year archive and restore endpoints.
#
# 🔗 Dependencies:
# - pydantic, schemas.base.CamelModel, domain.models.garden_year
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1.garden_years

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from ....domain.models.garden_year import GardenYear, RestoreReport
from .base import CamelModel


class ArchiveYearRequest(CamelModel):
    year: Optional[int] = Field(default=None, ge=1900, le=3000, description="Defaults to the current year")
    name: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = None


class RestoreYearRequest(CamelModel):
    restore_layout: bool = True
    restore_placements: bool = True


class ArchivedPlacementResponse(CamelModel):
    x: int
    y: int
    w: int
    h: int
    count: int
    plant_name: str
    plant_spacing: Optional[int] = None
    seeds_started_date: Optional[date] = None
    transplanted_date: Optional[date] = None
    direct_sowed_date: Optional[date] = None
    harvest_started_date: Optional[date] = None
    harvest_ended_date: Optional[date] = None
    harvest_yield: Optional[float] = None
    harvest_yield_unit: Optional[str] = None


class ArchivedBedResponse(CamelModel):
    id: Optional[int] = None
    name: str
    width_inches: int
    height_inches: int
    cell_inches: int
    garden_x: Optional[int] = None
    garden_y: Optional[int] = None
    garden_rotated: bool = False
    micro_climate: Optional[str] = None
    placements: List[ArchivedPlacementResponse] = Field(default_factory=list)


class GardenYearSummaryResponse(CamelModel):
    id: int
    year: int
    name: str
    total_beds: int
    total_placements: int
    total_harvest: Optional[float] = None
    harvest_unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, archive: GardenYear) -> "GardenYearSummaryResponse":
        return cls.model_validate(archive)


class GardenYearResponse(GardenYearSummaryResponse):
    garden_snapshot: Optional[Dict[str, Any]] = None
    beds_snapshot: List[ArchivedBedResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, archive: GardenYear) -> "GardenYearResponse":
        return cls.model_validate(archive)


class RestoreResponse(CamelModel):
    message: str
    beds_created: int
    beds_updated: int
    placements_created: int
    plants_not_found: List[str]

    @classmethod
    def from_domain(cls, report: RestoreReport) -> "RestoreResponse":
        return cls(
            message=report.message,
            beds_created=report.beds_created,
            beds_updated=report.beds_updated,
            placements_created=report.placements_created,
            plants_not_found=report.plants_not_found,
        )
