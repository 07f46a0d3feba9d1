# 📄 File: garden_planner/modules/garden_layout/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every web request its own set of garden tools (database access, services,
# handlers) that all share one database transaction.
#
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers. One AsyncSession per request (cached by FastAPI within the
# request) feeds every repository, so each operation's read-decide-write runs in a single
# transaction committed or rolled back by get_db_session.
#
# 🔗 Dependencies:
# - FastAPI Depends
# - garden_planner.shared.infrastructure.database (get_db_session)
# - infrastructure repository implementations, domain services, application handlers
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 routers

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.dependencies import CurrentUser, get_current_user
from garden_planner.shared.infrastructure.database.session import get_db_session

from ..application.handlers.command_handlers import (
    ArchiveCommandHandler,
    BedCommandHandler,
    GardenCommandHandler,
    PlantCommandHandler,
    PlantingCommandHandler,
)
from ..application.handlers.query_handlers import (
    ArchiveQueryHandler,
    BedQueryHandler,
    GardenQueryHandler,
    PlacementQueryHandler,
    PlantQueryHandler,
)
from ..domain.repositories.bed_repository import BedRepository
from ..domain.repositories.garden_repository import GardenRepository, GateRepository, WalkwayRepository
from ..domain.repositories.garden_year_repository import GardenYearRepository
from ..domain.repositories.placement_repository import PlacementHistoryRepository, PlacementRepository
from ..domain.repositories.plant_repository import PlantRepository
from ..domain.services.bed_planting_service import BedPlantingService
from ..domain.services.bed_service import BedService
from ..domain.services.garden_archive_service import GardenArchiveService
from ..domain.services.garden_layout_service import GardenLayoutService
from ..domain.services.plant_service import PlantService
from ..infrastructure.database.bed_repository_impl import BedRepositoryImpl
from ..infrastructure.database.garden_repository_impl import (
    GardenRepositoryImpl,
    GateRepositoryImpl,
    WalkwayRepositoryImpl,
)
from ..infrastructure.database.garden_year_repository_impl import GardenYearRepositoryImpl
from ..infrastructure.database.placement_repository_impl import (
    PlacementHistoryRepositoryImpl,
    PlacementRepositoryImpl,
)
from ..infrastructure.database.plant_repository_impl import PlantRepositoryImpl

logger = logging.getLogger(__name__)


# =========================================================================
# OWNER
# =========================================================================

async def get_owner_id(current_user: CurrentUser = Depends(get_current_user)) -> str:
    """Opaque owner id every garden layout record is scoped to."""
    return current_user.user_id


# =========================================================================
# REPOSITORIES
# =========================================================================

def get_garden_repository(session: AsyncSession = Depends(get_db_session)) -> GardenRepository:
    return GardenRepositoryImpl(session)


def get_walkway_repository(session: AsyncSession = Depends(get_db_session)) -> WalkwayRepository:
    return WalkwayRepositoryImpl(session)


def get_gate_repository(session: AsyncSession = Depends(get_db_session)) -> GateRepository:
    return GateRepositoryImpl(session)


def get_bed_repository(session: AsyncSession = Depends(get_db_session)) -> BedRepository:
    return BedRepositoryImpl(session)


def get_plant_repository(session: AsyncSession = Depends(get_db_session)) -> PlantRepository:
    return PlantRepositoryImpl(session)


def get_placement_repository(session: AsyncSession = Depends(get_db_session)) -> PlacementRepository:
    return PlacementRepositoryImpl(session)


def get_history_repository(session: AsyncSession = Depends(get_db_session)) -> PlacementHistoryRepository:
    return PlacementHistoryRepositoryImpl(session)


def get_garden_year_repository(session: AsyncSession = Depends(get_db_session)) -> GardenYearRepository:
    return GardenYearRepositoryImpl(session)


# =========================================================================
# DOMAIN SERVICES
# =========================================================================

def get_layout_service(
    gardens: GardenRepository = Depends(get_garden_repository),
    beds: BedRepository = Depends(get_bed_repository),
    walkways: WalkwayRepository = Depends(get_walkway_repository),
    gates: GateRepository = Depends(get_gate_repository),
    settings: Settings = Depends(get_settings),
) -> GardenLayoutService:
    return GardenLayoutService(gardens, beds, walkways, gates, settings=settings)


def get_bed_service(
    beds: BedRepository = Depends(get_bed_repository),
    placements: PlacementRepository = Depends(get_placement_repository),
    settings: Settings = Depends(get_settings),
) -> BedService:
    return BedService(beds, placements, settings=settings)


def get_plant_service(
    plants: PlantRepository = Depends(get_plant_repository),
    settings: Settings = Depends(get_settings),
) -> PlantService:
    return PlantService(plants, settings=settings)


def get_planting_service(
    beds: BedRepository = Depends(get_bed_repository),
    plants: PlantRepository = Depends(get_plant_repository),
    placements: PlacementRepository = Depends(get_placement_repository),
    history: PlacementHistoryRepository = Depends(get_history_repository),
    settings: Settings = Depends(get_settings),
) -> BedPlantingService:
    return BedPlantingService(beds, plants, placements, history, settings=settings)


def get_archive_service(
    gardens: GardenRepository = Depends(get_garden_repository),
    beds: BedRepository = Depends(get_bed_repository),
    plants: PlantRepository = Depends(get_plant_repository),
    placements: PlacementRepository = Depends(get_placement_repository),
    years: GardenYearRepository = Depends(get_garden_year_repository),
    settings: Settings = Depends(get_settings),
) -> GardenArchiveService:
    return GardenArchiveService(gardens, beds, plants, placements, years, settings=settings)


# =========================================================================
# HANDLERS
# =========================================================================

def get_garden_command_handler(
    layout_service: GardenLayoutService = Depends(get_layout_service),
) -> GardenCommandHandler:
    return GardenCommandHandler(layout_service)


def get_garden_query_handler(
    layout_service: GardenLayoutService = Depends(get_layout_service),
) -> GardenQueryHandler:
    return GardenQueryHandler(layout_service)


def get_bed_command_handler(
    bed_service: BedService = Depends(get_bed_service),
    layout_service: GardenLayoutService = Depends(get_layout_service),
) -> BedCommandHandler:
    return BedCommandHandler(bed_service, layout_service)


def get_bed_query_handler(
    bed_service: BedService = Depends(get_bed_service),
    planting_service: BedPlantingService = Depends(get_planting_service),
) -> BedQueryHandler:
    return BedQueryHandler(bed_service, planting_service)


def get_plant_command_handler(
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantCommandHandler:
    return PlantCommandHandler(plant_service)


def get_plant_query_handler(
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantQueryHandler:
    return PlantQueryHandler(plant_service)


def get_planting_command_handler(
    planting_service: BedPlantingService = Depends(get_planting_service),
) -> PlantingCommandHandler:
    return PlantingCommandHandler(planting_service)


def get_placement_query_handler(
    planting_service: BedPlantingService = Depends(get_planting_service),
) -> PlacementQueryHandler:
    return PlacementQueryHandler(planting_service)


def get_archive_command_handler(
    archive_service: GardenArchiveService = Depends(get_archive_service),
) -> ArchiveCommandHandler:
    return ArchiveCommandHandler(archive_service)


def get_archive_query_handler(
    archive_service: GardenArchiveService = Depends(get_archive_service),
) -> ArchiveQueryHandler:
    return ArchiveQueryHandler(archive_service)
