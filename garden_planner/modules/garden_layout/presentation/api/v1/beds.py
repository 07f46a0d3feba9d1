# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/beds.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for beds: creating them, moving them around the garden, putting plants in
# their squares, clearing squares, and looking at a bed's planting history.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for bed CRUD, garden positioning (garden-scale validator), plant placement
# and cell clearing (bed-scale spacing validator), blocked-cells, rotation-check, history
# and duplication.
#
# 🔗 Dependencies:
# - FastAPI, application commands/handlers, bed/garden/placement schemas
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 (router aggregation)

"""
Beds API Endpoints

Endpoints:
- GET /beds, POST /beds
- GET /beds/{bed_id}: Bed with placements
- PATCH /beds/{bed_id}: name, microClimate, gardenRotated
- DELETE /beds/{bed_id}
- POST /beds/{bed_id}/position: {gardenX, gardenY}; nulls detach the bed
- POST /beds/{bed_id}/place: {plantId, x, y}
- POST /beds/{bed_id}/clear: {x, y}; idempotent
- GET /beds/{bed_id}/blocked-cells?plantId=
- GET /beds/{bed_id}/rotation-check?plantId=&x=&y=
- GET /beds/{bed_id}/history
- POST /beds/{bed_id}/duplicate
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, status

from ....application.commands.bed_commands import CreateBedCommand, UpdateBedCommand
from ....application.commands.garden_commands import PositionBedCommand
from ....application.commands.placement_commands import ClearCellCommand, PlacePlantCommand
from ....application.handlers.command_handlers import (
    BedCommandHandler,
    GardenCommandHandler,
    PlantingCommandHandler,
)
from ....application.handlers.query_handlers import BedQueryHandler
from ...dependencies import (
    get_bed_command_handler,
    get_bed_query_handler,
    get_garden_command_handler,
    get_owner_id,
    get_planting_command_handler,
)
from ..schemas.base import OkResponse
from ..schemas.bed_schemas import (
    BedCreateRequest,
    BedDetailResponse,
    BedHistoryResponse,
    BedResponse,
    BedUpdateRequest,
    BlockedCellsResponse,
    RotationCheckResponse,
)
from ..schemas.garden_schemas import BedPositionRequest
from ..schemas.placement_schemas import ClearCellRequest, PlacementResponse, PlacePlantRequest

logger = logging.getLogger(__name__)

beds_router = APIRouter(prefix="/beds", tags=["Beds"])

LAYOUT_ERROR_RESPONSES = {
    400: {"description": "Garden not set up, or position outside the grid"},
    404: {"description": "Bed not found"},
    409: {"description": "Overlap or spacing conflict"},
    422: {"description": "Invalid coordinates"},
}


# =========================================================================
# BED CRUD
# =========================================================================

@beds_router.get("", response_model=List[BedResponse], summary="List beds")
async def list_beds(
    owner_id: str = Depends(get_owner_id),
    handler: BedQueryHandler = Depends(get_bed_query_handler),
) -> List[BedResponse]:
    return [BedResponse.from_domain(b) for b in await handler.list_beds(owner_id)]


@beds_router.post(
    "",
    response_model=BedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a bed",
)
async def create_bed(
    payload: BedCreateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: BedCommandHandler = Depends(get_bed_command_handler),
) -> BedResponse:
    bed = await handler.create_bed(CreateBedCommand(owner_id=owner_id, **payload.model_dump()))
    return BedResponse.from_domain(bed)


@beds_router.get("/{bed_id}", response_model=BedDetailResponse, summary="Get a bed with its placements")
async def get_bed(
    bed_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: BedQueryHandler = Depends(get_bed_query_handler),
) -> BedDetailResponse:
    bed, placements = await handler.get_bed(owner_id, bed_id)
    return BedDetailResponse.from_domain_with_placements(bed, placements)


@beds_router.patch("/{bed_id}", response_model=BedResponse, summary="Update a bed")
async def update_bed(
    bed_id: int,
    payload: BedUpdateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: BedCommandHandler = Depends(get_bed_command_handler),
) -> BedResponse:
    bed = await handler.update_bed(
        UpdateBedCommand(owner_id=owner_id, bed_id=bed_id, changes=payload.model_dump(exclude_unset=True))
    )
    return BedResponse.from_domain(bed)


@beds_router.delete("/{bed_id}", response_model=OkResponse, summary="Delete a bed")
async def delete_bed(
    bed_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: BedCommandHandler = Depends(get_bed_command_handler),
) -> OkResponse:
    await handler.delete_bed(owner_id, bed_id)
    return OkResponse()


@beds_router.post(
    "/{bed_id}/duplicate",
    response_model=BedDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Duplicate a bed",
)
async def duplicate_bed(
    bed_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: BedCommandHandler = Depends(get_bed_command_handler),
) -> BedDetailResponse:
    copy, placements = await handler.duplicate_bed(owner_id, bed_id)
    return BedDetailResponse.from_domain_with_placements(copy, placements)


# =========================================================================
# GARDEN POSITION
# =========================================================================

@beds_router.post(
    "/{bed_id}/position",
    response_model=BedResponse,
    summary="Position a bed on the garden grid",
    description="Moves the bed's top-left corner to (gardenX, gardenY). "
                "Null on either coordinate removes the bed from the garden.",
    responses=LAYOUT_ERROR_RESPONSES,
)
async def position_bed(
    bed_id: int,
    payload: BedPositionRequest,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> BedResponse:
    bed = await handler.position_bed(
        PositionBedCommand(
            owner_id=owner_id,
            bed_id=bed_id,
            garden_x=payload.garden_x,
            garden_y=payload.garden_y,
        )
    )
    return BedResponse.from_domain(bed)


# =========================================================================
# PLANTING
# =========================================================================

@beds_router.post(
    "/{bed_id}/place",
    response_model=PlacementResponse,
    summary="Place a plant in a bed cell",
    responses=LAYOUT_ERROR_RESPONSES,
)
async def place_plant(
    bed_id: int,
    payload: PlacePlantRequest,
    owner_id: str = Depends(get_owner_id),
    handler: PlantingCommandHandler = Depends(get_planting_command_handler),
) -> PlacementResponse:
    placement = await handler.place_plant(
        PlacePlantCommand(
            owner_id=owner_id,
            bed_id=bed_id,
            plant_id=payload.plant_id,
            x=payload.x,
            y=payload.y,
        )
    )
    return PlacementResponse.from_domain(placement)


@beds_router.post(
    "/{bed_id}/clear",
    response_model=OkResponse,
    summary="Clear a bed cell",
    description="Removes whatever occupies (x, y). Clearing an empty cell succeeds.",
)
async def clear_cell(
    bed_id: int,
    payload: ClearCellRequest,
    owner_id: str = Depends(get_owner_id),
    handler: PlantingCommandHandler = Depends(get_planting_command_handler),
) -> OkResponse:
    await handler.clear_cell(ClearCellCommand(owner_id=owner_id, bed_id=bed_id, x=payload.x, y=payload.y))
    return OkResponse()


@beds_router.get(
    "/{bed_id}/blocked-cells",
    response_model=BlockedCellsResponse,
    summary="Cells where a plant cannot currently go",
)
async def get_blocked_cells(
    bed_id: int,
    plant_id: int = Query(..., alias="plantId"),
    owner_id: str = Depends(get_owner_id),
    handler: BedQueryHandler = Depends(get_bed_query_handler),
) -> BlockedCellsResponse:
    return BlockedCellsResponse.from_domain(await handler.get_blocked_cells(owner_id, bed_id, plant_id))


@beds_router.get(
    "/{bed_id}/rotation-check",
    response_model=RotationCheckResponse,
    summary="Crop rotation warnings for a cell",
)
async def check_rotation(
    bed_id: int,
    plant_id: int = Query(..., alias="plantId"),
    x: float = Query(...),
    y: float = Query(...),
    owner_id: str = Depends(get_owner_id),
    handler: BedQueryHandler = Depends(get_bed_query_handler),
) -> RotationCheckResponse:
    return RotationCheckResponse.from_domain(await handler.check_rotation(owner_id, bed_id, plant_id, x, y))


@beds_router.get("/{bed_id}/history", response_model=BedHistoryResponse, summary="Bed planting history")
async def get_bed_history(
    bed_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: BedQueryHandler = Depends(get_bed_query_handler),
) -> BedHistoryResponse:
    return BedHistoryResponse.from_domain(await handler.get_history(owner_id, bed_id))
