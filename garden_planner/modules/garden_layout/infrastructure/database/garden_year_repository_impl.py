# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/garden_year_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores the yearly garden snapshots and finds them again by year.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of GardenYearRepository. Snapshots are stored as JSON documents
# (dates serialized as ISO strings) and re-validated into ArchivedBed on read. The
# UNIQUE (owner_id, year) constraint turns a concurrent duplicate archive into
# DuplicateResourceError.
#
# 🔗 Dependencies:
# - domain.repositories.garden_year_repository (interface)
# - infrastructure.database.models (GardenYearModel)
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies, GardenArchiveService

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_planner.shared.core.exceptions import DuplicateResourceError

from ...domain.models.garden_year import ArchivedBed, GardenYear
from ...domain.repositories.garden_year_repository import GardenYearRepository
from .models import GardenYearModel

logger = logging.getLogger(__name__)


class GardenYearRepositoryImpl(GardenYearRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_year(self, owner_id: str, year: int) -> Optional[GardenYear]:
        result = await self._session.execute(
            select(GardenYearModel).where(
                GardenYearModel.owner_id == owner_id,
                GardenYearModel.year == year,
            )
        )
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_id: str) -> List[GardenYear]:
        result = await self._session.execute(
            select(GardenYearModel)
            .where(GardenYearModel.owner_id == owner_id)
            .order_by(GardenYearModel.year.desc())
        )
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def create(self, garden_year: GardenYear) -> GardenYear:
        """
        Insert an archive.

        Raises:
            DuplicateResourceError: An archive for (owner_id, year) already exists
        """
        model = GardenYearModel(
            owner_id=garden_year.owner_id,
            year=garden_year.year,
            name=garden_year.name,
            garden_snapshot=garden_year.garden_snapshot,
            beds_snapshot=[bed.model_dump(mode="json") for bed in garden_year.beds_snapshot],
            total_beds=garden_year.total_beds,
            total_placements=garden_year.total_placements,
            total_harvest=garden_year.total_harvest,
            harvest_unit=garden_year.harvest_unit,
            notes=garden_year.notes,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(f"Archive {garden_year.year} for owner {garden_year.owner_id} already exists")
            raise DuplicateResourceError(
                f"Archive for {garden_year.year} already exists. Delete it first to create a new one.",
                resource_type="garden_year",
                conflicting_field="year",
                conflicting_value=garden_year.year,
            ) from e

        return self._model_to_domain(model)

    async def delete(self, owner_id: str, year: int) -> bool:
        result = await self._session.execute(
            delete(GardenYearModel).where(
                GardenYearModel.owner_id == owner_id,
                GardenYearModel.year == year,
            )
        )
        return result.rowcount > 0

    @staticmethod
    def _model_to_domain(model: GardenYearModel) -> GardenYear:
        return GardenYear(
            id=model.id,
            owner_id=model.owner_id,
            year=model.year,
            name=model.name,
            garden_snapshot=model.garden_snapshot,
            beds_snapshot=[ArchivedBed.model_validate(bed) for bed in (model.beds_snapshot or [])],
            total_beds=model.total_beds,
            total_placements=model.total_placements,
            total_harvest=model.total_harvest,
            harvest_unit=model.harvest_unit,
            notes=model.notes,
            created_at=model.created_at,
        )
