# 📄 File: garden_planner/modules/garden_layout/domain/repositories/garden_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how gardens, walkways and gates are saved and looked up, without saying which
# database is used.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for garden-grid aggregates (Garden, Walkway, Gate) following the
# Repository pattern and dependency inversion principle.
# 🔗 Dependencies:
# Domain models (Garden, Walkway, Gate), typing, abc
# 🔄 Connected Modules / Calls From:
# garden_layout_service.py, garden_archive_service.py, infrastructure implementations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.garden import Garden, Gate, Walkway


class GardenRepository(ABC):
    """
    Repository interface for the one-per-owner Garden.

    Implementation Notes:
    - Methods return domain entities, not database models
    - for_update=True must lock the garden row until the transaction ends;
      bed positioning relies on it to serialize concurrent moves
    """

    @abstractmethod
    async def get_by_owner(self, owner_id: str, for_update: bool = False) -> Optional[Garden]:
        """
        Get the owner's garden.

        Args:
            owner_id: Opaque owner id
            for_update: Lock the row for the rest of the transaction

        Returns:
            Garden if set up, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, garden: Garden) -> Garden:
        """
        Create the garden, or update dimensions of the existing one.

        Returns:
            Garden with generated fields populated
        """
        pass


class WalkwayRepository(ABC):
    """Repository interface for walkways on the garden grid."""

    @abstractmethod
    async def get_by_id(self, walkway_id: int) -> Optional[Walkway]:
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[Walkway]:
        pass

    @abstractmethod
    async def create(self, walkway: Walkway) -> Walkway:
        pass

    @abstractmethod
    async def update(self, walkway: Walkway) -> Walkway:
        pass

    @abstractmethod
    async def delete(self, walkway_id: int) -> bool:
        pass


class GateRepository(ABC):
    """Repository interface for gates on the garden edge."""

    @abstractmethod
    async def get_by_id(self, gate_id: int) -> Optional[Gate]:
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[Gate]:
        pass

    @abstractmethod
    async def create(self, gate: Gate) -> Gate:
        pass

    @abstractmethod
    async def delete(self, gate_id: int) -> bool:
        pass
