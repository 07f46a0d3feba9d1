# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/bed_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds and removes garden beds, and lists the beds already sitting on the garden
# so new positions can be checked against them.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of BedRepository with row locking for positioning and
# placement writes, and explicit child cleanup on delete so it behaves the same on
# PostgreSQL and SQLite (which does not enforce ON DELETE CASCADE by default).
#
# 🔗 Dependencies:
# - domain.repositories.bed_repository (interface)
# - infrastructure.database.models (BedModel, BedPlacementModel, PlacementHistoryModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (repository wiring)
# - GardenLayoutService, BedService, BedPlantingService, GardenArchiveService

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.bed import Bed
from ...domain.repositories.bed_repository import BedRepository
from .models import BedModel, BedPlacementModel, PlacementHistoryModel

logger = logging.getLogger(__name__)


class BedRepositoryImpl(BedRepository):
    """
    SQLAlchemy implementation of the BedRepository interface.

    Lists are ordered newest first (created_at, then id, descending), which is
    also the storage order overlap checks walk.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, bed_id: int, for_update: bool = False) -> Optional[Bed]:
        model = await self._get_model(bed_id, for_update=for_update)
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_id: str) -> List[Bed]:
        stmt = (
            select(BedModel)
            .where(BedModel.owner_id == owner_id)
            .order_by(BedModel.created_at.desc(), BedModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def list_placed_for_owner(self, owner_id: str, exclude_bed_id: Optional[int] = None) -> List[Bed]:
        stmt = select(BedModel).where(
            BedModel.owner_id == owner_id,
            BedModel.garden_x.is_not(None),
            BedModel.garden_y.is_not(None),
        )
        if exclude_bed_id is not None:
            stmt = stmt.where(BedModel.id != exclude_bed_id)
        stmt = stmt.order_by(BedModel.created_at.desc(), BedModel.id.desc())

        result = await self._session.execute(stmt)
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def create(self, bed: Bed) -> Bed:
        model = BedModel(owner_id=bed.owner_id)
        self._update_model_from_domain(model, bed)
        self._session.add(model)
        await self._session.flush()

        logger.debug(f"Created bed {model.id} for owner {bed.owner_id}")
        return self._model_to_domain(model)

    async def update(self, bed: Bed) -> Bed:
        model = await self._get_model(bed.id)
        if model is None:
            raise ValueError(f"Bed not found: {bed.id}")

        self._update_model_from_domain(model, bed)
        await self._session.flush()
        return self._model_to_domain(model)

    async def delete(self, bed_id: int) -> bool:
        await self._session.execute(delete(BedPlacementModel).where(BedPlacementModel.bed_id == bed_id))
        await self._session.execute(delete(PlacementHistoryModel).where(PlacementHistoryModel.bed_id == bed_id))
        result = await self._session.execute(delete(BedModel).where(BedModel.id == bed_id))
        return result.rowcount > 0

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _get_model(self, bed_id: int, for_update: bool = False) -> Optional[BedModel]:
        stmt = select(BedModel).where(BedModel.id == bed_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _update_model_from_domain(model: BedModel, bed: Bed) -> None:
        model.name = bed.name
        model.width_inches = bed.width_inches
        model.height_inches = bed.height_inches
        model.cell_inches = bed.cell_inches
        model.garden_x = bed.garden_x
        model.garden_y = bed.garden_y
        model.garden_rotated = bed.garden_rotated
        model.micro_climate = bed.micro_climate

    @staticmethod
    def _model_to_domain(model: BedModel) -> Bed:
        return Bed(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            width_inches=model.width_inches,
            height_inches=model.height_inches,
            cell_inches=model.cell_inches,
            garden_x=model.garden_x,
            garden_y=model.garden_y,
            garden_rotated=bool(model.garden_rotated),
            micro_climate=model.micro_climate,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
