# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/garden.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for setting up the garden and getting the whole garden picture at once.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for GET/PUT /garden and GET /garden/layout.
#
# 🔗 Dependencies:
# - FastAPI, application handlers, garden schemas, presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 (router aggregation)

"""
Garden API Endpoints

Endpoints:
- GET /garden: The owner's garden (null until set up)
- PUT /garden: Create or resize the garden
- GET /garden/layout: Garden, placed/unplaced beds, walkways and gates
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from ....application.commands.garden_commands import UpsertGardenCommand
from ....application.handlers.command_handlers import GardenCommandHandler
from ....application.handlers.query_handlers import GardenQueryHandler
from ...dependencies import get_garden_command_handler, get_garden_query_handler, get_owner_id
from ..schemas.garden_schemas import GardenLayoutResponse, GardenResponse, GardenUpsertRequest

logger = logging.getLogger(__name__)

garden_router = APIRouter(prefix="/garden", tags=["Garden"])


@garden_router.get(
    "",
    response_model=Optional[GardenResponse],
    summary="Get garden",
    responses={401: {"description": "Authentication required"}},
)
async def get_garden(
    owner_id: str = Depends(get_owner_id),
    handler: GardenQueryHandler = Depends(get_garden_query_handler),
) -> Optional[GardenResponse]:
    garden = await handler.get_garden(owner_id)
    return GardenResponse.from_domain(garden) if garden else None


@garden_router.put(
    "",
    response_model=GardenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create or resize the garden",
    responses={422: {"description": "Dimensions too small or unsupported cell size"}},
)
async def upsert_garden(
    payload: GardenUpsertRequest,
    owner_id: str = Depends(get_owner_id),
    handler: GardenCommandHandler = Depends(get_garden_command_handler),
) -> GardenResponse:
    garden = await handler.upsert_garden(
        UpsertGardenCommand(
            owner_id=owner_id,
            width_inches=payload.width_inches,
            height_inches=payload.height_inches,
            cell_inches=payload.cell_inches,
        )
    )
    return GardenResponse.from_domain(garden)


@garden_router.get(
    "/layout",
    response_model=GardenLayoutResponse,
    summary="Get the full garden layout",
)
async def get_garden_layout(
    owner_id: str = Depends(get_owner_id),
    handler: GardenQueryHandler = Depends(get_garden_query_handler),
) -> GardenLayoutResponse:
    return GardenLayoutResponse.from_domain(await handler.get_layout(owner_id))
