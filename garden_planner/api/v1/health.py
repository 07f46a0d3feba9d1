# 📄 File: garden_planner/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup that says whether the Garden Planner and its database are working.
#
# 🧪 Purpose (Technical Summary):
# Health check endpoints for load balancers and monitoring, including a database
# connectivity probe.
#
# 🔗 Dependencies:
# FastAPI, garden_planner.shared.infrastructure.database.connection
#
# 🔄 Connected Modules / Calls From:
# garden_planner.api.v1.router, garden_planner.main

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from garden_planner.shared.config.settings import get_settings
from garden_planner.shared.infrastructure.database.connection import database_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health Check"])


@health_router.get(
    "/health",
    summary="Health Check",
    description="Service and database health for load balancers and monitoring",
)
async def health_check() -> JSONResponse:
    """
    Health check endpoint

    Returns 200 when the database answers, 503 otherwise.
    """
    settings = get_settings()
    database = await database_health_check()
    healthy = database["status"] == "healthy"

    if not healthy:
        logger.warning(f"Health check degraded: {database.get('error')}")

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "garden-planner-api",
            "version": settings.APP_VERSION,
            "components": {"database": database},
        },
    )
