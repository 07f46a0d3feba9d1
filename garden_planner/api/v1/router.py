# 📄 File: garden_planner/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API: sends garden, bed, plant and archive
# requests to the right place.
#
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and the garden layout
# module router.
#
# 🔗 Dependencies:
# FastAPI, garden_planner.api.v1.health,
# garden_planner.modules.garden_layout.presentation.api.v1
#
# 🔄 Connected Modules / Calls From:
# garden_planner.main

import logging

from fastapi import APIRouter

from garden_planner.modules.garden_layout.presentation.api.v1 import garden_layout_router
from garden_planner.shared.config.settings import get_settings

from .health import health_router

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

api_v1_router.include_router(health_router)
api_v1_router.include_router(garden_layout_router)


@api_v1_router.get("/", summary="API v1 Information", tags=["API Info"])
async def api_v1_info() -> dict:
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": "v1",
        "resources": [
            "/garden",
            "/garden/layout",
            "/plants",
            "/beds",
            "/placements",
            "/walkways",
            "/gates",
            "/garden-years",
        ],
    }
