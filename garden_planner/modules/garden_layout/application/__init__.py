# 📄 File: garden_planner/modules/garden_layout/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "to-do list" layer: each request from the app becomes a command or query that is
# handed to the right garden service.
#
# 🧪 Purpose (Technical Summary):
# Application layer with pydantic commands and grouped command/query handlers that
# orchestrate domain services and emit layout events.
#
# 🔗 Dependencies:
# - garden_layout.domain.services
# - garden_planner.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - garden_layout.presentation (routers and dependency wiring)
