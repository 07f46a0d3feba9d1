"""
Shared utilities for the Garden Planner application.
"""

from .logging import (
    setup_logging,
    get_logger,
    request_id_var,
    user_id_var,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "request_id_var",
    "user_id_var",
]
