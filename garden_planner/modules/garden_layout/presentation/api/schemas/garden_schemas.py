# 📄 File: garden_planner/modules/garden_layout/presentation/api/schemas/garden_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends and gets back for the garden grid: garden size, moving beds,
# walkways, gates and the full garden picture.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for garden-scale endpoints. Coordinates are accepted as
# numbers (or null for bed detach) so integrality is decided by the domain validator.
#
# 🔗 Dependencies:
# - pydantic, schemas.base.CamelModel
# - domain models (Garden, Bed, Walkway, Gate) and GardenLayout
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1.garden, beds, walkways_gates

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ....domain.models.garden import Garden, Gate, Walkway
from ....domain.services.garden_layout_service import GardenLayout
from .base import CamelModel
from .bed_schemas import BedResponse


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class GardenUpsertRequest(CamelModel):
    width_inches: int = Field(..., description="Garden width in inches", examples=[120])
    height_inches: int = Field(..., description="Garden height in inches", examples=[120])
    cell_inches: Optional[int] = Field(default=None, description="Garden grid pitch (6 or 12)", examples=[12])


class BedPositionRequest(CamelModel):
    """Top-left garden cell for the bed; null on either axis removes it from the garden."""

    garden_x: Optional[float] = Field(..., description="Garden column, or null to detach", examples=[0])
    garden_y: Optional[float] = Field(..., description="Garden row, or null to detach", examples=[0])


class WalkwayCreateRequest(CamelModel):
    x: float
    y: float
    width: float = 1
    height: float = 1
    name: Optional[str] = Field(default=None, max_length=200)


class WalkwayUpdateRequest(CamelModel):
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    name: Optional[str] = Field(default=None, max_length=200)


class GateCreateRequest(CamelModel):
    x: float
    y: float
    width: float = 1
    side: Optional[str] = Field(default=None, description="top, right, bottom or left")
    name: Optional[str] = Field(default=None, max_length=200)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class GardenResponse(CamelModel):
    id: int
    width_inches: int
    height_inches: int
    cell_inches: int
    cols: int
    rows: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, garden: Garden) -> "GardenResponse":
        return cls(
            id=garden.id,
            width_inches=garden.width_inches,
            height_inches=garden.height_inches,
            cell_inches=garden.cell_inches,
            cols=garden.cols,
            rows=garden.rows,
            created_at=garden.created_at,
            updated_at=garden.updated_at,
        )


class WalkwayResponse(CamelModel):
    id: int
    name: Optional[str] = None
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_domain(cls, walkway: Walkway) -> "WalkwayResponse":
        return cls.model_validate(walkway)


class GateResponse(CamelModel):
    id: int
    name: Optional[str] = None
    x: int
    y: int
    width: int
    side: str

    @classmethod
    def from_domain(cls, gate: Gate) -> "GateResponse":
        return cls(id=gate.id, name=gate.name, x=gate.x, y=gate.y, width=gate.width, side=gate.side.value)


class PlacedBedResponse(BedResponse):
    """Bed with its footprint on the garden grid."""

    footprint_w: int
    footprint_h: int


class GardenLayoutResponse(CamelModel):
    garden: Optional[GardenResponse] = None
    placed_beds: List[PlacedBedResponse] = Field(default_factory=list)
    unplaced_beds: List[BedResponse] = Field(default_factory=list)
    walkways: List[WalkwayResponse] = Field(default_factory=list)
    gates: List[GateResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, layout: GardenLayout) -> "GardenLayoutResponse":
        return cls(
            garden=GardenResponse.from_domain(layout.garden) if layout.garden else None,
            placed_beds=[
                PlacedBedResponse(
                    **BedResponse.from_domain(bed).model_dump(),
                    footprint_w=rect.w,
                    footprint_h=rect.h,
                )
                for bed, rect in layout.placed_beds
            ],
            unplaced_beds=[BedResponse.from_domain(bed) for bed in layout.unplaced_beds],
            walkways=[WalkwayResponse.from_domain(w) for w in layout.walkways],
            gates=[GateResponse.from_domain(g) for g in layout.gates],
        )
