# 📄 File: garden_planner/modules/garden_layout/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects every garden layout web endpoint into one router.
#
# 🧪 Purpose (Technical Summary):
# API version 1 router aggregation for the garden layout module.
#
# 🔗 Dependencies:
# - FastAPI APIRouter, the v1 endpoint modules
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.api.v1.router

from fastapi import APIRouter

from .beds import beds_router
from .garden import garden_router
from .garden_years import garden_years_router
from .placements import placements_router
from .plants import plants_router
from .walkways_gates import gates_router, walkways_router

garden_layout_router = APIRouter()
garden_layout_router.include_router(garden_router)
garden_layout_router.include_router(plants_router)
garden_layout_router.include_router(beds_router)
garden_layout_router.include_router(placements_router)
garden_layout_router.include_router(walkways_router)
garden_layout_router.include_router(gates_router)
garden_layout_router.include_router(garden_years_router)

__all__ = ["garden_layout_router"]
