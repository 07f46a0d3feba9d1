# 📄 File: garden_planner/modules/garden_layout/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the user's plant catalog is saved and looked up.
# 🧪 Purpose (Technical Summary):
# Repository interface for Plant catalog entries consumed by spacing checks and restore.
# 🔗 Dependencies:
# Domain models (Plant), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, bed_planting_service.py, garden_archive_service.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """Repository interface for the owner's plant catalog."""

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[Plant]:
        """The owner's plants in creation order."""
        pass

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        pass
