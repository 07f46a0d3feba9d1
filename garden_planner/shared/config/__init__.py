# 📄 File: garden_planner/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the Garden Planner how to connect to its database
# and which garden defaults (cell sizes, bed sizes) to use.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
- Garden grid and bed defaults
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
