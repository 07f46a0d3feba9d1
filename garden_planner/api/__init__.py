# 📄 File: garden_planner/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the Garden Planner web service: request checks and the list of
# available endpoints.
#
# 🧪 Purpose (Technical Summary):
# API package holding HTTP middleware and the versioned router aggregation.
#
# 🔗 Dependencies:
# - middleware (authentication, logging, error handling)
# - v1 (router aggregation, health)
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.main
