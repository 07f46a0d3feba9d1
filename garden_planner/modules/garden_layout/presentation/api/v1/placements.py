# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/placements.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for one planting: see it, record its dates and harvest, remove it, or
# move it into the bed's history once the season is over.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for placement get/patch/delete and archive-to-history. Ownership is
# checked through the placement's bed.
#
# 🔗 Dependencies:
# - FastAPI, application handlers, placement/bed schemas
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 (router aggregation)

import logging

from fastapi import APIRouter, Depends, status

from ....application.commands.placement_commands import UpdatePlacementCommand
from ....application.handlers.command_handlers import PlantingCommandHandler
from ....application.handlers.query_handlers import PlacementQueryHandler
from ...dependencies import get_owner_id, get_placement_query_handler, get_planting_command_handler
from ..schemas.base import OkResponse
from ..schemas.bed_schemas import HistoryEntryResponse
from ..schemas.placement_schemas import PlacementResponse, PlacementUpdateRequest

logger = logging.getLogger(__name__)

placements_router = APIRouter(prefix="/placements", tags=["Placements"])


@placements_router.get("/{placement_id}", response_model=PlacementResponse, summary="Get a placement")
async def get_placement(
    placement_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: PlacementQueryHandler = Depends(get_placement_query_handler),
) -> PlacementResponse:
    return PlacementResponse.from_domain(await handler.get_placement(owner_id, placement_id))


@placements_router.patch(
    "/{placement_id}",
    response_model=PlacementResponse,
    summary="Update placement lifecycle, yield or notes",
)
async def update_placement(
    placement_id: int,
    payload: PlacementUpdateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: PlantingCommandHandler = Depends(get_planting_command_handler),
) -> PlacementResponse:
    placement = await handler.update_placement(
        UpdatePlacementCommand(
            owner_id=owner_id,
            placement_id=placement_id,
            changes=payload.model_dump(exclude_unset=True),
        )
    )
    return PlacementResponse.from_domain(placement)


@placements_router.delete("/{placement_id}", response_model=OkResponse, summary="Delete a placement")
async def delete_placement(
    placement_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: PlantingCommandHandler = Depends(get_planting_command_handler),
) -> OkResponse:
    await handler.delete_placement(owner_id, placement_id)
    return OkResponse()


@placements_router.post(
    "/{placement_id}/archive",
    response_model=HistoryEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Move a placement into the bed's history",
)
async def archive_placement(
    placement_id: int,
    owner_id: str = Depends(get_owner_id),
    handler: PlantingCommandHandler = Depends(get_planting_command_handler),
) -> HistoryEntryResponse:
    return HistoryEntryResponse.from_domain(await handler.archive_placement(owner_id, placement_id))
