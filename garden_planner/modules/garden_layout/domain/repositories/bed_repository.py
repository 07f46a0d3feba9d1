# 📄 File: garden_planner/modules/garden_layout/domain/repositories/bed_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how beds are saved, moved and looked up, without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for Bed entities. Lookups by id are not owner-filtered so services
# can tell "missing" from "foreign" (both are reported identically).
# 🔗 Dependencies:
# Domain models (Bed), typing, abc
# 🔄 Connected Modules / Calls From:
# garden_layout_service.py, bed_service.py, bed_planting_service.py, garden_archive_service.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.bed import Bed


class BedRepository(ABC):
    """
    Repository interface for Bed entity data access operations.

    Implementation Notes:
    - for_update=True must lock the bed row until the transaction ends;
      plant placement relies on it to serialize writes into one bed
    - Deleting a bed removes its placements and history
    """

    @abstractmethod
    async def get_by_id(self, bed_id: int, for_update: bool = False) -> Optional[Bed]:
        """
        Get bed by ID.

        Args:
            bed_id: Bed ID to find
            for_update: Lock the row for the rest of the transaction

        Returns:
            Bed entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[Bed]:
        """All of the owner's beds, newest first."""
        pass

    @abstractmethod
    async def list_placed_for_owner(self, owner_id: str, exclude_bed_id: Optional[int] = None) -> List[Bed]:
        """
        The owner's beds that currently have garden coordinates.

        Args:
            owner_id: Opaque owner id
            exclude_bed_id: Bed to leave out (the one being moved)
        """
        pass

    @abstractmethod
    async def create(self, bed: Bed) -> Bed:
        pass

    @abstractmethod
    async def update(self, bed: Bed) -> Bed:
        """Persist every mutable field of an existing bed."""
        pass

    @abstractmethod
    async def delete(self, bed_id: int) -> bool:
        pass
