# 📄 File: garden_planner/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that look at every request before it reaches the garden endpoints: who is
# asking, how long it took, and turning crashes into tidy error messages.
#
# 🧪 Purpose (Technical Summary):
# Middleware package with shared path exclusion rules.
#
# 🔗 Dependencies:
# - FastAPI / Starlette middleware
#
# 🔄 Connected Modules / Calls From:
# - garden_planner.main (middleware registration)

"""
Garden Planner API Middleware Package

Middleware Components:
    - AuthenticationMiddleware: Bearer token validation, owner id on request state
    - RequestLoggingMiddleware: Request/response logging with request ids
    - ErrorHandlingMiddleware: Catches unhandled errors into the JSON error envelope

Middleware Stack Order (outermost first):
    1. ErrorHandlingMiddleware
    2. RequestLoggingMiddleware
    3. AuthenticationMiddleware
    4. Application Routes
"""

from typing import List

PUBLIC_PATHS: List[str] = [
    "/",
    "/health",
    "/api/v1/health",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/favicon.ico",
]

LOGGING_EXCLUDE_PATHS: List[str] = [
    "/health",
    "/api/v1/health",
    "/favicon.ico",
]


def should_exclude_path(path: str, excluded: List[str]) -> bool:
    """Exact match, or a prefix match for the documentation paths."""
    if path in excluded:
        return True
    return any(path.startswith(p + "/") for p in excluded if p not in ("/",))


from .authentication import AuthenticationMiddleware  # noqa: E402
from .error_handling import ErrorHandlingMiddleware, register_exception_handlers  # noqa: E402
from .logging import RequestLoggingMiddleware  # noqa: E402

__all__ = [
    "PUBLIC_PATHS",
    "LOGGING_EXCLUDE_PATHS",
    "should_exclude_path",
    "AuthenticationMiddleware",
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "register_exception_handlers",
]
