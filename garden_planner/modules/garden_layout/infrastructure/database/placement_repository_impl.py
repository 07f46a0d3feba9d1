# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/placement_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds the plants placed in bed squares, and the history of plantings that
# have finished.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of PlacementRepository and PlacementHistoryRepository.
# Placement reads join the plant catalog to fill plant_name / plant_spacing_inches.
# A UNIQUE (bed_id, x, y) violation surfaces as ConflictError.
#
# 🔗 Dependencies:
# - domain repository interfaces and models
# - infrastructure.database.models (BedPlacementModel, PlacementHistoryModel, PlantModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (repository wiring)
# - BedPlantingService, BedService, GardenArchiveService

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_planner.shared.core.exceptions import ConflictError

from ...domain.models.placement import LIFECYCLE_DATE_FIELDS, BedPlacement, PlacementHistory
from ...domain.repositories.placement_repository import (
    PlacementHistoryRepository,
    PlacementRepository,
)
from .models import BedPlacementModel, PlacementHistoryModel, PlantModel

logger = logging.getLogger(__name__)

MUTABLE_PLACEMENT_COLUMNS = ("plant_id", "x", "y", "w", "h", "count") + LIFECYCLE_DATE_FIELDS + (
    "harvest_yield",
    "harvest_yield_unit",
    "notes",
)


class PlacementRepositoryImpl(PlacementRepository):
    """SQLAlchemy implementation of the live placement repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select_with_plant(self):
        return select(BedPlacementModel, PlantModel.name, PlantModel.spacing_inches).outerjoin(
            PlantModel, PlantModel.id == BedPlacementModel.plant_id
        )

    async def get_by_id(self, placement_id: int) -> Optional[BedPlacement]:
        result = await self._session.execute(
            self._select_with_plant().where(BedPlacementModel.id == placement_id)
        )
        row = result.one_or_none()
        return self._model_to_domain(*row) if row else None

    async def get_at(self, bed_id: int, x: int, y: int) -> Optional[BedPlacement]:
        result = await self._session.execute(
            self._select_with_plant().where(
                BedPlacementModel.bed_id == bed_id,
                BedPlacementModel.x == x,
                BedPlacementModel.y == y,
            )
        )
        row = result.one_or_none()
        return self._model_to_domain(*row) if row else None

    async def list_for_bed(self, bed_id: int) -> List[BedPlacement]:
        result = await self._session.execute(
            self._select_with_plant()
            .where(BedPlacementModel.bed_id == bed_id)
            .order_by(BedPlacementModel.id)
        )
        return [self._model_to_domain(*row) for row in result.all()]

    async def list_for_beds(self, bed_ids: List[int]) -> List[BedPlacement]:
        if not bed_ids:
            return []
        result = await self._session.execute(
            self._select_with_plant()
            .where(BedPlacementModel.bed_id.in_(bed_ids))
            .order_by(BedPlacementModel.bed_id, BedPlacementModel.id)
        )
        return [self._model_to_domain(*row) for row in result.all()]

    async def create(self, placement: BedPlacement) -> BedPlacement:
        """
        Insert a placement.

        Raises:
            ConflictError: The cell was filled by a concurrent request
        """
        model = BedPlacementModel(bed_id=placement.bed_id)
        self._update_model_from_domain(model, placement)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                f"Placement insert at bed {placement.bed_id} ({placement.x},{placement.y}) conflicted: {e}"
            )
            raise ConflictError(
                "That cell was just filled by another request. Reload and try again.",
                resource_type="placement",
            ) from e

        return self._model_to_domain(model, placement.plant_name, placement.plant_spacing_inches)

    async def update(self, placement: BedPlacement) -> BedPlacement:
        model = await self._session.get(BedPlacementModel, placement.id)
        if model is None:
            raise ValueError(f"Placement not found: {placement.id}")

        self._update_model_from_domain(model, placement)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("Placement conflicts with another cell", resource_type="placement") from e

        return self._model_to_domain(model, placement.plant_name, placement.plant_spacing_inches)

    async def delete(self, placement_id: int) -> bool:
        result = await self._session.execute(
            delete(BedPlacementModel).where(BedPlacementModel.id == placement_id)
        )
        return result.rowcount > 0

    async def delete_at(self, bed_id: int, x: int, y: int) -> int:
        result = await self._session.execute(
            delete(BedPlacementModel).where(
                BedPlacementModel.bed_id == bed_id,
                BedPlacementModel.x == x,
                BedPlacementModel.y == y,
            )
        )
        return result.rowcount

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _update_model_from_domain(model: BedPlacementModel, placement: BedPlacement) -> None:
        for column in MUTABLE_PLACEMENT_COLUMNS:
            setattr(model, column, getattr(placement, column))

    @staticmethod
    def _model_to_domain(
        model: BedPlacementModel,
        plant_name: Optional[str] = None,
        plant_spacing: Optional[int] = None,
    ) -> BedPlacement:
        return BedPlacement(
            id=model.id,
            bed_id=model.bed_id,
            plant_id=model.plant_id,
            x=model.x,
            y=model.y,
            w=model.w,
            h=model.h,
            count=model.count,
            seeds_started_date=model.seeds_started_date,
            transplanted_date=model.transplanted_date,
            direct_sowed_date=model.direct_sowed_date,
            harvest_started_date=model.harvest_started_date,
            harvest_ended_date=model.harvest_ended_date,
            harvest_yield=model.harvest_yield,
            harvest_yield_unit=model.harvest_yield_unit,
            notes=model.notes,
            plant_name=plant_name,
            plant_spacing_inches=plant_spacing,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class PlacementHistoryRepositoryImpl(PlacementHistoryRepository):
    """SQLAlchemy implementation of the append-only placement history."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, history: PlacementHistory) -> PlacementHistory:
        model = PlacementHistoryModel(
            bed_id=history.bed_id,
            plant_name=history.plant_name,
            plant_type=history.plant_type,
            x=history.x,
            y=history.y,
            w=history.w,
            h=history.h,
            season_year=history.season_year,
            season_name=history.season_name,
            harvest_yield=history.harvest_yield,
            harvest_yield_unit=history.harvest_yield_unit,
            notes=history.notes,
        )
        self._session.add(model)
        await self._session.flush()
        return self._model_to_domain(model)

    async def list_for_bed(self, bed_id: int) -> List[PlacementHistory]:
        result = await self._session.execute(
            select(PlacementHistoryModel)
            .where(PlacementHistoryModel.bed_id == bed_id)
            .order_by(
                PlacementHistoryModel.season_year.desc(),
                PlacementHistoryModel.created_at.desc(),
                PlacementHistoryModel.id.desc(),
            )
        )
        return [self._model_to_domain(m) for m in result.scalars().all()]

    @staticmethod
    def _model_to_domain(model: PlacementHistoryModel) -> PlacementHistory:
        return PlacementHistory(
            id=model.id,
            bed_id=model.bed_id,
            plant_name=model.plant_name,
            plant_type=model.plant_type,
            x=model.x,
            y=model.y,
            w=model.w,
            h=model.h,
            season_year=model.season_year,
            season_name=model.season_name,
            harvest_yield=model.harvest_yield,
            harvest_yield_unit=model.harvest_yield_unit,
            notes=model.notes,
            created_at=model.created_at,
        )
