# 📄 File: garden_planner/modules/garden_layout/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the garden: what a bed, plant and planting are, and when one may go somewhere.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic entities, repository interfaces and pure/persistence-agnostic services.
# Submodules are imported directly; models and services reference each other.
# 🔗 Dependencies:
# pydantic, garden_planner.shared.core
# 🔄 Connected Modules / Calls From:
# application handlers, infrastructure repositories
