# 📄 File: garden_planner/modules/garden_layout/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# A plant from the user's catalog, mainly how far apart it needs to be planted.
# 🧪 Purpose (Technical Summary):
# Minimal plant catalog entity consumed by the spacing validator and by archive
# restore (case-insensitive name matching).
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# bed_planting_service.py, garden_archive_service.py, plant_service.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Plant(BaseModel):
    """Plant catalog entry scoped to one owner."""

    id: Optional[int] = None
    owner_id: str
    name: str = Field(..., min_length=1, max_length=200)
    spacing_inches: int = Field(12, gt=0)
    days_to_maturity_min: Optional[int] = Field(None, ge=0)
    days_to_maturity_max: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_maturity_range(self) -> "Plant":
        if (
            self.days_to_maturity_min is not None
            and self.days_to_maturity_max is not None
            and self.days_to_maturity_min > self.days_to_maturity_max
        ):
            raise ValueError("days_to_maturity_min cannot exceed days_to_maturity_max")
        return self
