"""
Core utilities package for the Garden Planner application.
Provides security, dependencies and the exception hierarchy.
"""

from .exceptions import (
    GardenPlannerException,
    AuthenticationError,
    ValidationError,
    ConfigurationError,
    OutOfBoundsError,
    OverlapError,
    SpacingConflictError,
    NotFoundError,
    AccessDeniedError,
    DuplicateResourceError,
    ConflictError,
    DatabaseError,
)

from .security import (
    create_access_token,
    verify_token,
    SecurityManager,
    get_security_manager,
)

from .dependencies import (
    CurrentUser,
    get_current_user,
)

__all__ = [
    "GardenPlannerException",
    "AuthenticationError",
    "ValidationError",
    "ConfigurationError",
    "OutOfBoundsError",
    "OverlapError",
    "SpacingConflictError",
    "NotFoundError",
    "AccessDeniedError",
    "DuplicateResourceError",
    "ConflictError",
    "DatabaseError",
    "create_access_token",
    "verify_token",
    "SecurityManager",
    "get_security_manager",
    "CurrentUser",
    "get_current_user",
]
