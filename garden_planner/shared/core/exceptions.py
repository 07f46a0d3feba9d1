# 📄 File: garden_planner/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the Garden Planner uses to explain
# why a bed or plant could not be placed, instead of returning generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for the API error envelope.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain services (layout/spacing validators), repositories, session management,
# API exception handlers and middleware

from typing import Any, Dict, Optional

from fastapi import status


class GardenPlannerException(Exception):
    """
    Base exception class for the Garden Planner application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# AUTHENTICATION EXCEPTIONS
# =============================================================================

class AuthenticationError(GardenPlannerException):
    """
    Exception raised for authentication failures.
    Used when the bearer token is missing or invalid.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


# =============================================================================
# INPUT & CONFIGURATION EXCEPTIONS
# =============================================================================

class ValidationError(GardenPlannerException):
    """
    Exception raised for data validation failures.
    Used for malformed or non-finite coordinates and invalid dimensions.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class ConfigurationError(GardenPlannerException):
    """
    Exception raised when an operation needs setup that has not happened yet.
    Used when beds are positioned before the user's garden exists.
    """

    def __init__(
        self,
        message: str = "Garden not set up yet.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="CONFIGURATION_ERROR"
        )


# =============================================================================
# LAYOUT EXCEPTIONS
# =============================================================================

class OutOfBoundsError(GardenPlannerException):
    """
    Exception raised when a requested rectangle falls outside its grid.
    """

    def __init__(
        self,
        message: str = "Placement would be outside the grid bounds.",
        x: Optional[int] = None,
        y: Optional[int] = None,
        w: Optional[int] = None,
        h: Optional[int] = None,
        cols: Optional[int] = None,
        rows: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        for key, value in (("x", x), ("y", y), ("w", w), ("h", h), ("cols", cols), ("rows", rows)):
            if value is not None:
                details[key] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="OUT_OF_BOUNDS"
        )


class OverlapError(GardenPlannerException):
    """
    Exception raised when a bed would collide with another placed bed.
    Names the first conflicting bed that was found.
    """

    def __init__(
        self,
        conflicting_bed_name: str,
        conflicting_bed_id: Optional[int] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["conflicting_bed_name"] = conflicting_bed_name
        if conflicting_bed_id is not None:
            details["conflicting_bed_id"] = conflicting_bed_id

        super().__init__(
            message=message or f'Overlaps with "{conflicting_bed_name}".',
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="OVERLAP"
        )


class SpacingConflictError(GardenPlannerException):
    """
    Exception raised when a plant cell violates another plant's minimum spacing.
    """

    def __init__(
        self,
        required_cells: int,
        grid_cell_inches: float,
        placing: Optional[str] = None,
        existing: Optional[str] = None,
        conflict_x: Optional[int] = None,
        conflict_y: Optional[int] = None,
        message: str = "Too close to another plant",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        details["required_cells"] = required_cells
        details["grid_cell_inches"] = grid_cell_inches
        if placing:
            details["placing"] = placing
        if existing:
            details["existing"] = existing
        if conflict_x is not None:
            details["conflict_x"] = conflict_x
        if conflict_y is not None:
            details["conflict_y"] = conflict_y

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="SPACING_CONFLICT"
        )


# =============================================================================
# RESOURCE EXCEPTIONS
# =============================================================================

class NotFoundError(GardenPlannerException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class AccessDeniedError(NotFoundError):
    """
    Exception raised when a resource exists but belongs to another user.

    Serialized exactly like NotFoundError so callers cannot probe for
    other users' records.
    """


class DuplicateResourceError(GardenPlannerException):
    """
    Exception raised when attempting to create a resource that already exists.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        conflicting_field: Optional[str] = None,
        conflicting_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflicting_field:
            details["conflicting_field"] = conflicting_field
        if conflicting_value is not None:
            details["conflicting_value"] = str(conflicting_value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


class ConflictError(GardenPlannerException):
    """
    Exception raised when a write loses a race against a storage constraint.
    The caller may re-issue the request.
    """

    def __init__(
        self,
        message: str = "Resource was modified concurrently",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(GardenPlannerException):
    """
    Exception raised for unexpected database operation failures.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )
