# 📄 File: garden_planner/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'garden_planner' folder as our Garden Planner application code
# and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the Garden Planner
# FastAPI service (garden/bed layout engine).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.main (application entry point)
# - pyproject.toml (version metadata)

"""
Garden Planner - Garden Layout Engine

Backend API for laying out garden beds on a garden grid, placing plants
inside each bed's own grid with spacing rules, and archiving/restoring
whole seasons.
"""

__version__ = "1.0.0"
__title__ = "Garden Planner API"
__description__ = "Garden and bed layout engine"
