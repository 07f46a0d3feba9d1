# 📄 File: garden_planner/modules/garden_layout/domain/repositories/placement_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants placed in beds, and the history of finished plantings, are saved
# and looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for BedPlacement (unique per bed/x/y) and the append-only
# PlacementHistory.
# 🔗 Dependencies:
# Domain models (BedPlacement, PlacementHistory), typing, abc
# 🔄 Connected Modules / Calls From:
# bed_planting_service.py, bed_service.py, garden_archive_service.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.placement import BedPlacement, PlacementHistory


class PlacementRepository(ABC):
    """
    Repository interface for live bed placements.

    Implementation Notes:
    - Read methods fill plant_name / plant_spacing_inches from the plant catalog
    - At most one placement may exist per (bed_id, x, y); a lost race on that
      constraint surfaces as ConflictError
    """

    @abstractmethod
    async def get_by_id(self, placement_id: int) -> Optional[BedPlacement]:
        pass

    @abstractmethod
    async def get_at(self, bed_id: int, x: int, y: int) -> Optional[BedPlacement]:
        """Placement whose top-left cell is (x, y), if any."""
        pass

    @abstractmethod
    async def list_for_bed(self, bed_id: int) -> List[BedPlacement]:
        pass

    @abstractmethod
    async def list_for_beds(self, bed_ids: List[int]) -> List[BedPlacement]:
        pass

    @abstractmethod
    async def create(self, placement: BedPlacement) -> BedPlacement:
        pass

    @abstractmethod
    async def update(self, placement: BedPlacement) -> BedPlacement:
        """Persist every mutable field of an existing placement."""
        pass

    @abstractmethod
    async def delete(self, placement_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_at(self, bed_id: int, x: int, y: int) -> int:
        """
        Remove any placement at (x, y).

        Returns:
            int: Number of rows removed (0 when the cell was already empty)
        """
        pass


class PlacementHistoryRepository(ABC):
    """Repository interface for archived (completed) placements."""

    @abstractmethod
    async def create(self, history: PlacementHistory) -> PlacementHistory:
        pass

    @abstractmethod
    async def list_for_bed(self, bed_id: int) -> List[PlacementHistory]:
        """History of a bed, season year descending then most recent first."""
        pass
