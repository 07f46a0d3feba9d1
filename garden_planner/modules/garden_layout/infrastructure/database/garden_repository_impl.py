# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/garden_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and loads the garden itself plus the walkways and gates drawn on it.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of GardenRepository, WalkwayRepository and GateRepository.
# get_by_owner(for_update=True) issues SELECT ... FOR UPDATE so bed positioning is
# serialized per owner on databases with row locks.
#
# 🔗 Dependencies:
# - domain repository interfaces and models
# - infrastructure.database.models (GardenModel, WalkwayModel, GateModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies (repository wiring)
# - GardenLayoutService, GardenArchiveService

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_planner.shared.core.exceptions import ConflictError

from ...domain.models.garden import Garden, Gate, GateSide, Walkway
from ...domain.repositories.garden_repository import (
    GardenRepository,
    GateRepository,
    WalkwayRepository,
)
from .models import GardenModel, GateModel, WalkwayModel

logger = logging.getLogger(__name__)


class GardenRepositoryImpl(GardenRepository):
    """SQLAlchemy implementation of the one-per-owner garden repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_owner(self, owner_id: str, for_update: bool = False) -> Optional[Garden]:
        stmt = select(GardenModel).where(GardenModel.owner_id == owner_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def save(self, garden: Garden) -> Garden:
        """
        Insert or update the owner's garden.

        Raises:
            ConflictError: A concurrent request created the garden first
        """
        result = await self._session.execute(
            select(GardenModel).where(GardenModel.owner_id == garden.owner_id)
        )
        model = result.scalar_one_or_none()

        if model is None:
            model = GardenModel(owner_id=garden.owner_id)
            self._session.add(model)

        model.width_inches = garden.width_inches
        model.height_inches = garden.height_inches
        model.cell_inches = garden.cell_inches

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(f"Garden save for owner {garden.owner_id} lost a race: {e}")
            raise ConflictError("Garden was modified concurrently", resource_type="garden") from e

        return self._model_to_domain(model)

    @staticmethod
    def _model_to_domain(model: GardenModel) -> Garden:
        return Garden(
            id=model.id,
            owner_id=model.owner_id,
            width_inches=model.width_inches,
            height_inches=model.height_inches,
            cell_inches=model.cell_inches,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class WalkwayRepositoryImpl(WalkwayRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, walkway_id: int) -> Optional[Walkway]:
        model = await self._session.get(WalkwayModel, walkway_id)
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_id: str) -> List[Walkway]:
        result = await self._session.execute(
            select(WalkwayModel).where(WalkwayModel.owner_id == owner_id).order_by(WalkwayModel.id)
        )
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def create(self, walkway: Walkway) -> Walkway:
        model = WalkwayModel(
            owner_id=walkway.owner_id,
            name=walkway.name,
            x=walkway.x,
            y=walkway.y,
            width=walkway.width,
            height=walkway.height,
        )
        self._session.add(model)
        await self._session.flush()
        return self._model_to_domain(model)

    async def update(self, walkway: Walkway) -> Walkway:
        model = await self._session.get(WalkwayModel, walkway.id)
        model.name = walkway.name
        model.x = walkway.x
        model.y = walkway.y
        model.width = walkway.width
        model.height = walkway.height
        await self._session.flush()
        return self._model_to_domain(model)

    async def delete(self, walkway_id: int) -> bool:
        result = await self._session.execute(delete(WalkwayModel).where(WalkwayModel.id == walkway_id))
        return result.rowcount > 0

    @staticmethod
    def _model_to_domain(model: WalkwayModel) -> Walkway:
        return Walkway(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            x=model.x,
            y=model.y,
            width=model.width,
            height=model.height,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class GateRepositoryImpl(GateRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, gate_id: int) -> Optional[Gate]:
        model = await self._session.get(GateModel, gate_id)
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_id: str) -> List[Gate]:
        result = await self._session.execute(
            select(GateModel).where(GateModel.owner_id == owner_id).order_by(GateModel.id)
        )
        return [self._model_to_domain(m) for m in result.scalars().all()]

    async def create(self, gate: Gate) -> Gate:
        model = GateModel(
            owner_id=gate.owner_id,
            name=gate.name,
            x=gate.x,
            y=gate.y,
            width=gate.width,
            side=gate.side.value,
        )
        self._session.add(model)
        await self._session.flush()
        return self._model_to_domain(model)

    async def delete(self, gate_id: int) -> bool:
        result = await self._session.execute(delete(GateModel).where(GateModel.id == gate_id))
        return result.rowcount > 0

    @staticmethod
    def _model_to_domain(model: GateModel) -> Gate:
        return Gate(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            x=model.x,
            y=model.y,
            width=model.width,
            side=GateSide(model.side),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
