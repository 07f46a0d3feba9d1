# 📄 File: garden_planner/modules/garden_layout/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The part of the garden layout system the app talks to over the web.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, request/response schemas and dependency wiring.
#
# 🔗 Dependencies:
# - FastAPI, application handlers, infrastructure repositories
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.api.v1.router
