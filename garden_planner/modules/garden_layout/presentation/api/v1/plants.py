"""
Plant catalog endpoints: GET /plants and POST /plants.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ....application.commands.bed_commands import CreatePlantCommand
from ....application.handlers.command_handlers import PlantCommandHandler
from ....application.handlers.query_handlers import PlantQueryHandler
from ...dependencies import get_owner_id, get_plant_command_handler, get_plant_query_handler
from ..schemas.bed_schemas import PlantCreateRequest, PlantResponse

logger = logging.getLogger(__name__)

plants_router = APIRouter(prefix="/plants", tags=["Plants"])


@plants_router.get("", response_model=List[PlantResponse], summary="List plants")
async def list_plants(
    owner_id: str = Depends(get_owner_id),
    handler: PlantQueryHandler = Depends(get_plant_query_handler),
) -> List[PlantResponse]:
    return [PlantResponse.from_domain(p) for p in await handler.list_plants(owner_id)]


@plants_router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant to the catalog",
)
async def create_plant(
    payload: PlantCreateRequest,
    owner_id: str = Depends(get_owner_id),
    handler: PlantCommandHandler = Depends(get_plant_command_handler),
) -> PlantResponse:
    plant = await handler.create_plant(CreatePlantCommand(owner_id=owner_id, **payload.model_dump()))
    return PlantResponse.from_domain(plant)
