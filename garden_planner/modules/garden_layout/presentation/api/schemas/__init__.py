# 📄 File: garden_planner/modules/garden_layout/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of every request and response the garden layout API understands.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas (camelCase on the wire) with from_domain builders.
#
# 🔗 Dependencies:
# - pydantic, garden_layout.domain
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1 routers
