# 📄 File: garden_planner/modules/garden_layout/presentation/api/schemas/bed_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends and gets back for beds and plants, including which squares
# are off-limits for a plant and what grew in a bed before.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for bed, plant catalog, blocked-cells, rotation-check
# and bed history endpoints.
#
# 🔗 Dependencies:
# - pydantic, schemas.base.CamelModel, domain models and service result types
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1.beds, plants, garden

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from ....domain.models.bed import Bed
from ....domain.models.placement import BedPlacement, PlacementHistory
from ....domain.models.plant import Plant
from ....domain.services.bed_planting_service import BedHistory, BlockedCells, RotationCheck
from .base import CamelModel
from .placement_schemas import PlacementResponse


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class BedCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Raised Bed 1"])
    width_inches: Optional[int] = Field(default=None, description="Defaults to 96", examples=[48])
    height_inches: Optional[int] = Field(default=None, description="Defaults to 48", examples=[96])
    cell_inches: Optional[int] = Field(default=None, description="Bed grid pitch, defaults to 12", examples=[12])
    micro_climate: Optional[str] = Field(default=None, max_length=100)


class BedUpdateRequest(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    micro_climate: Optional[str] = Field(default=None, max_length=100)
    garden_rotated: Optional[bool] = None


class PlantCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Tomato"])
    spacing_inches: Optional[int] = Field(default=None, description="Defaults to 12", examples=[24])
    days_to_maturity_min: Optional[int] = Field(default=None, ge=0)
    days_to_maturity_max: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class BedResponse(CamelModel):
    id: int
    name: str
    width_inches: int
    height_inches: int
    cell_inches: int
    cols: int
    rows: int
    garden_x: Optional[int] = None
    garden_y: Optional[int] = None
    garden_rotated: bool = False
    micro_climate: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, bed: Bed) -> "BedResponse":
        grid = bed.grid
        return cls(
            id=bed.id,
            name=bed.name,
            width_inches=bed.width_inches,
            height_inches=bed.height_inches,
            cell_inches=bed.cell_inches,
            cols=grid.cols,
            rows=grid.rows,
            garden_x=bed.garden_x,
            garden_y=bed.garden_y,
            garden_rotated=bed.garden_rotated,
            micro_climate=bed.micro_climate,
            created_at=bed.created_at,
            updated_at=bed.updated_at,
        )


class BedDetailResponse(BedResponse):
    placements: List[PlacementResponse] = Field(default_factory=list)

    @classmethod
    def from_domain_with_placements(cls, bed: Bed, placements: List[BedPlacement]) -> "BedDetailResponse":
        return cls(
            **BedResponse.from_domain(bed).model_dump(),
            placements=[PlacementResponse.from_domain(p) for p in placements],
        )


class PlantResponse(CamelModel):
    id: int
    name: str
    spacing_inches: int
    days_to_maturity_min: Optional[int] = None
    days_to_maturity_max: Optional[int] = None
    notes: Optional[str] = None

    @classmethod
    def from_domain(cls, plant: Plant) -> "PlantResponse":
        return cls.model_validate(plant)


class CellResponse(CamelModel):
    x: int
    y: int


class BlockedCellsResponse(CamelModel):
    required_cells: int
    cells: List[CellResponse]

    @classmethod
    def from_domain(cls, blocked: BlockedCells) -> "BlockedCellsResponse":
        return cls(
            required_cells=blocked.required_cells,
            cells=[CellResponse(x=x, y=y) for x, y in sorted(blocked.cells, key=lambda c: (c[1], c[0]))],
        )


class HistoryEntryResponse(CamelModel):
    id: int
    bed_id: int
    plant_name: str
    plant_type: Optional[str] = None
    x: int
    y: int
    w: int
    h: int
    season_year: int
    season_name: str
    harvest_yield: Optional[float] = None
    harvest_yield_unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, entry: PlacementHistory) -> "HistoryEntryResponse":
        return cls.model_validate(entry)


class BedHistoryResponse(CamelModel):
    history: List[HistoryEntryResponse]
    by_year: Dict[str, List[HistoryEntryResponse]]
    years: List[int]

    @classmethod
    def from_domain(cls, history: BedHistory) -> "BedHistoryResponse":
        return cls(
            history=[HistoryEntryResponse.from_domain(h) for h in history.history],
            by_year={
                str(year): [HistoryEntryResponse.from_domain(h) for h in entries]
                for year, entries in history.by_year.items()
            },
            years=history.years,
        )


class RotationCheckResponse(CamelModel):
    ok: bool
    family: Optional[str] = None
    warnings: List[HistoryEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, check: RotationCheck) -> "RotationCheckResponse":
        return cls(
            ok=check.ok,
            family=check.family,
            warnings=[HistoryEntryResponse.from_domain(h) for h in check.conflicts],
        )
