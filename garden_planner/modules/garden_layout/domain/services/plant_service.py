"""
Plant catalog service: the minimal catalog that spacing checks and
archive restore resolve plants against.
"""

import logging
from typing import List, Optional

from garden_planner.shared.config.settings import Settings, get_settings
from garden_planner.shared.core.exceptions import ValidationError

from ..models.plant import Plant
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)


class PlantService:
    def __init__(self, plant_repository: PlantRepository, settings: Optional[Settings] = None):
        self._plants = plant_repository
        self._settings = settings or get_settings()

    async def list_plants(self, owner_id: str) -> List[Plant]:
        return await self._plants.list_for_owner(owner_id)

    async def create_plant(
        self,
        owner_id: str,
        name: str,
        spacing_inches: Optional[int] = None,
        days_to_maturity_min: Optional[int] = None,
        days_to_maturity_max: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> Plant:
        if not name or not name.strip():
            raise ValidationError("Plant name is required.", field="name")

        spacing = spacing_inches if spacing_inches is not None else self._settings.DEFAULT_PLANT_SPACING_INCHES
        if spacing <= 0:
            raise ValidationError(
                "spacingInches must be greater than 0.",
                field="spacingInches",
                value=spacing,
                constraint=">0",
            )
        if (
            days_to_maturity_min is not None
            and days_to_maturity_max is not None
            and days_to_maturity_min > days_to_maturity_max
        ):
            raise ValidationError(
                "daysToMaturityMin cannot exceed daysToMaturityMax.",
                field="daysToMaturityMin",
                value=days_to_maturity_min,
            )

        plant = await self._plants.create(
            Plant(
                owner_id=owner_id,
                name=name.strip(),
                spacing_inches=spacing,
                days_to_maturity_min=days_to_maturity_min,
                days_to_maturity_max=days_to_maturity_max,
                notes=notes,
            )
        )
        logger.info(f"Plant {plant.id} '{plant.name}' ({spacing}in spacing) created for owner {owner_id}")
        return plant
