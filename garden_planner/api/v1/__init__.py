# 📄 File: garden_planner/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the Garden Planner web API.
#
# 🧪 Purpose (Technical Summary):
# API v1 package exporting the aggregated router and health router.
#
# 🔗 Dependencies:
# - router.py, health.py
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.main

from .health import health_router
from .router import api_v1_router

__all__ = ["api_v1_router", "health_router"]
