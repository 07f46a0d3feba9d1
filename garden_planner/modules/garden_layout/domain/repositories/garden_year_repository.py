# 📄 File: garden_planner/modules/garden_layout/domain/repositories/garden_year_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how yearly garden archives are saved, listed and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for append-only GardenYear snapshots, unique per (owner_id, year).
# 🔗 Dependencies:
# Domain models (GardenYear), typing, abc
# 🔄 Connected Modules / Calls From:
# garden_archive_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.garden_year import GardenYear


class GardenYearRepository(ABC):
    """
    Repository interface for yearly archives.

    Implementation Notes:
    - create() raises DuplicateResourceError if (owner_id, year) already exists,
      including when a concurrent archive won the race
    """

    @abstractmethod
    async def get_by_year(self, owner_id: str, year: int) -> Optional[GardenYear]:
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[GardenYear]:
        """The owner's archives, most recent year first."""
        pass

    @abstractmethod
    async def create(self, garden_year: GardenYear) -> GardenYear:
        pass

    @abstractmethod
    async def delete(self, owner_id: str, year: int) -> bool:
        pass
