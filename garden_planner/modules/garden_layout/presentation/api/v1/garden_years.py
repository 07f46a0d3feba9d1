# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/garden_years.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for saving a whole year's garden and rebuilding the garden from an
# earlier year.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for garden-year archives: list, archive, get, delete and restore replay.
#
# 🔗 Dependencies:
# - FastAPI, ArchiveCommandHandler / ArchiveQueryHandler, archive schemas
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 (router aggregation)

"""
Garden Year API Endpoints

Endpoints:
- GET /garden-years: Archive summaries, most recent year first
- POST /garden-years: Archive the current garden {year?, name?, notes?}
- GET /garden-years/{year}: Full snapshot
- DELETE /garden-years/{year}
- POST /garden-years/{year}/restore: {restoreLayout?, restorePlacements?} -> report

Restore is best-effort: plants missing from the current catalog are reported in
plantsNotFound and skipped, occupied cells are never overwritten.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from ....application.commands.archive_commands import ArchiveYearCommand, RestoreYearCommand
from ....application.handlers.command_handlers import ArchiveCommandHandler
from ....application.handlers.query_handlers import ArchiveQueryHandler
from ...dependencies import get_archive_command_handler, get_archive_query_handler, get_owner_id
from ..schemas.archive_schemas import (
    ArchiveYearRequest,
    GardenYearResponse,
    GardenYearSummaryResponse,
    RestoreResponse,
    RestoreYearRequest,
)
from ..schemas.base import OkResponse

logger = logging.getLogger(__name__)

garden_years_router = APIRouter(prefix="/garden-years", tags=["Garden Years"])


@garden_years_router.get("", response_model=List[GardenYearSummaryResponse], summary="List archived years")
async def list_garden_years(
    owner_id: str = Depends(get_owner_id),
    handler: ArchiveQueryHandler = Depends(get_archive_query_handler),
) -> List[GardenYearSummaryResponse]:
    return [GardenYearSummaryResponse.from_domain(a) for a in await handler.list_years(owner_id)]


@garden_years_router.post(
    "",
    response_model=GardenYearResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Archive the current garden",
    responses={409: {"description": "An archive already exists for that year"}},
)
async def archive_garden_year(
    payload: Optional[ArchiveYearRequest] = Body(default=None),
    owner_id: str = Depends(get_owner_id),
    handler: ArchiveCommandHandler = Depends(get_archive_command_handler),
) -> GardenYearResponse:
    payload = payload or ArchiveYearRequest()
    archive = await handler.archive_year(
        ArchiveYearCommand(owner_id=owner_id, year=payload.year, name=payload.name, notes=payload.notes)
    )
    return GardenYearResponse.from_domain(archive)


@garden_years_router.get("/{year}", response_model=GardenYearResponse, summary="Get an archived year")
async def get_garden_year(
    year: int,
    owner_id: str = Depends(get_owner_id),
    handler: ArchiveQueryHandler = Depends(get_archive_query_handler),
) -> GardenYearResponse:
    return GardenYearResponse.from_domain(await handler.get_year(owner_id, year))


@garden_years_router.delete("/{year}", response_model=OkResponse, summary="Delete an archived year")
async def delete_garden_year(
    year: int,
    owner_id: str = Depends(get_owner_id),
    handler: ArchiveCommandHandler = Depends(get_archive_command_handler),
) -> OkResponse:
    await handler.delete_year(owner_id, year)
    return OkResponse()


@garden_years_router.post(
    "/{year}/restore",
    response_model=RestoreResponse,
    summary="Restore beds and placements from an archived year",
)
async def restore_garden_year(
    year: int,
    payload: Optional[RestoreYearRequest] = Body(default=None),
    owner_id: str = Depends(get_owner_id),
    handler: ArchiveCommandHandler = Depends(get_archive_command_handler),
) -> RestoreResponse:
    payload = payload or RestoreYearRequest()
    report = await handler.restore_year(
        RestoreYearCommand(
            owner_id=owner_id,
            year=year,
            restore_layout=payload.restore_layout,
            restore_placements=payload.restore_placements,
        )
    )
    return RestoreResponse.from_domain(report)
