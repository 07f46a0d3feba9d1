"""
Infrastructure layer package for the Garden Planner application.
Provides database connection and session management.
"""
