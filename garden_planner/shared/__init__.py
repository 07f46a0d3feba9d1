"""
Shared kernel for the Garden Planner application.
Provides configuration, core exceptions, database infrastructure and logging.
"""
