"""Feature modules of the garden planner service."""
