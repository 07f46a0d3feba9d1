# 📄 File: garden_planner/modules/garden_layout/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the garden layout system: the garden grid, beds placed on it, plants placed
# inside beds, and yearly archives of the whole layout.
# 🧪 Purpose (Technical Summary):
# Package initialization for the garden layout module, layered as domain / application /
# infrastructure / presentation.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, garden_planner.shared
# 🔄 Connected Modules / Calls From:
# garden_planner.main, garden_planner.api.v1.router

"""
Garden Layout Module

- Garden setup and the garden-scale placement validator (bounds and overlap)
- Beds, walkways and gates drawn on the garden grid
- Bed-scale plant placement with spacing enforcement
- Placement history and crop rotation warnings
- Yearly archive snapshots and best-effort restore
"""
