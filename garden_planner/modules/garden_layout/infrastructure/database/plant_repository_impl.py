# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds the plants a gardener has in their catalog.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlantRepository (owner-scoped catalog, ordered by name).
#
# 🔗 Dependencies:
# - domain.repositories.plant_repository (interface)
# - infrastructure.database.models (PlantModel)
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies, PlantService, BedPlantingService, GardenArchiveService

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.plant import Plant
from ...domain.repositories.plant_repository import PlantRepository
from .models import PlantModel

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        model = await self._session.get(PlantModel, plant_id)
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_id: str) -> List[Plant]:
        result = await self._session.execute(
            select(PlantModel)
            .where(PlantModel.owner_id == owner_id)
            .order_by(PlantModel.name, PlantModel.id)
        )
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def create(self, plant: Plant) -> Plant:
        model = PlantModel(
            owner_id=plant.owner_id,
            name=plant.name,
            spacing_inches=plant.spacing_inches,
            days_to_maturity_min=plant.days_to_maturity_min,
            days_to_maturity_max=plant.days_to_maturity_max,
            notes=plant.notes,
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug(f"Created plant {model.id} for owner {plant.owner_id}")
        return self._model_to_domain(model)

    @staticmethod
    def _model_to_domain(model: PlantModel) -> Plant:
        return Plant(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            spacing_inches=model.spacing_inches,
            days_to_maturity_min=model.days_to_maturity_min,
            days_to_maturity_max=model.days_to_maturity_max,
            notes=model.notes,
            created_at=model.created_at,
        )
