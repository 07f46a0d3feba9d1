# 📄 File: garden_planner/modules/garden_layout/presentation/api/schemas/placement_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends and gets back when placing plants, clearing squares and
# recording a planting's progress.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for bed-scale writes and placement lifecycle.
#
# 🔗 Dependencies:
# - pydantic, schemas.base.CamelModel, domain.models.placement
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1.beds, placements

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from ....domain.models.placement import BedPlacement
from .base import CamelModel


class PlacePlantRequest(CamelModel):
    plant_id: int = Field(..., examples=[1])
    x: float = Field(..., description="Bed column", examples=[0])
    y: float = Field(..., description="Bed row", examples=[0])


class ClearCellRequest(CamelModel):
    x: float
    y: float


class PlacementUpdateRequest(CamelModel):
    """Only fields present in the body are changed; null clears a field."""

    count: Optional[int] = Field(default=None, ge=1)
    seeds_started_date: Optional[date] = None
    transplanted_date: Optional[date] = None
    direct_sowed_date: Optional[date] = None
    harvest_started_date: Optional[date] = None
    harvest_ended_date: Optional[date] = None
    harvest_yield: Optional[float] = Field(default=None, ge=0)
    harvest_yield_unit: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = None


class PlacementResponse(CamelModel):
    id: int
    bed_id: int
    plant_id: int
    plant_name: Optional[str] = None
    plant_spacing_inches: Optional[int] = None
    x: int
    y: int
    w: int
    h: int
    count: int
    status: str
    seeds_started_date: Optional[date] = None
    transplanted_date: Optional[date] = None
    direct_sowed_date: Optional[date] = None
    harvest_started_date: Optional[date] = None
    harvest_ended_date: Optional[date] = None
    harvest_yield: Optional[float] = None
    harvest_yield_unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, placement: BedPlacement) -> "PlacementResponse":
        return cls(**placement.model_dump(), status=placement.status)
