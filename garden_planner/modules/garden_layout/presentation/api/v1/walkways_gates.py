# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/walkways_gates.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for drawing paths and gates on the garden.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for walkway CRUD and gate create/list/delete. Both are bounds-checked
# against the garden grid when a garden exists.
#
# 🔗 Dependencies:
# - FastAPI, GardenCommandHandler / GardenQueryHandler, garden schemas
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 (router aggregation)

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ....application.commands.garden_commands import (
    CreateGateCommand,
    CreateWalkwayCommand,
    UpdateWalkwayCommand,
)
from ....application.handlers.command_handlers import GardenCommandHandler
from ....application.handlers.query_handlers import GardenQueryHandler
from ...dependencies import get_garden_command_handler, get_garden_query_handler, get_owner_id
from ..schemas.base import OkResponse
from ..schemas.garden_schemas import (
    GateCreateRequest,
    GateResponse,
    WalkwayCreateRequest,
    WalkwayResponse,
    WalkwayUpdateRequest,
)

logger = logging.getLogger(__name__)

walkways_router = APIRouter(prefix="/walkways", tags=["Walkways"])
gates_router = APIRouter(prefix="/gates", tags=["Gates"])


# =========================================================================
# WALKWAYS
# =========================================================================

@walkways_router.get("", response_model=List[WalkwayResponse], summary="List walkways")
async def list_walkways(
    owner_id: str = Depends(get_owner_id),
    handler: GardenQueryHandler = Depends(get_garden_query_handler),
) -> List[WalkwayResponse]:
    return [WalkwayResponse.from_domain(w) for w in await handler.list_walkways(owner_id)]


@walkways_router.post(
    "",
    response_model=WalkwayResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a walkway",
)
async def create_walkway(
    payload: WalkwayCreateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> WalkwayResponse:
    walkway = await handler.create_walkway(CreateWalkwayCommand(owner_id=owner_id, **payload.model_dump()))
    return WalkwayResponse.from_domain(walkway)


@walkways_router.patch("/{walkway_id}", response_model=WalkwayResponse, summary="Update a walkway")
async def update_walkway(
    walkway_id: int,
    payload: WalkwayUpdateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> WalkwayResponse:
    walkway = await handler.update_walkway(
        UpdateWalkwayCommand(
            owner_id=owner_id,
            walkway_id=walkway_id,
            changes=payload.model_dump(exclude_unset=True),
        )
    )
    return WalkwayResponse.from_domain(walkway)


@walkways_router.delete("/{walkway_id}", response_model=OkResponse, summary="Delete a walkway")
async def delete_walkway(
    walkway_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> OkResponse:
    await handler.delete_walkway(owner_id, walkway_id)
    return OkResponse()


# =========================================================================
# GATES
# =========================================================================

@gates_router.get("", response_model=List[GateResponse], summary="List gates")
async def list_gates(
    owner_id: str = Depends(get_owner_id),
    handler: GardenQueryHandler = Depends(get_garden_query_handler),
) -> List[GateResponse]:
    return [GateResponse.from_domain(g) for g in await handler.list_gates(owner_id)]


@gates_router.post(
    "",
    response_model=GateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a gate",
)
async def create_gate(
    payload: GateCreateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> GateResponse:
    gate = await handler.create_gate(CreateGateCommand(owner_id=owner_id, **payload.model_dump()))
    return GateResponse.from_domain(gate)


@gates_router.delete("/{gate_id}", response_model=OkResponse, summary="Delete a gate")
async def delete_gate(
    gate_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> OkResponse:
    await handler.delete_gate(owner_id, gate_id)
    return OkResponse()
