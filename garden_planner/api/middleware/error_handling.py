# 📄 File: garden_planner/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Turns every problem (a bed that would overlap, a plant too close to another, a crash)
# into the same friendly error message shape.
#
# 🧪 Purpose (Technical Summary):
# Exception handlers for GardenPlannerException and request validation errors, plus a
# middleware that converts anything left unhandled into a 500 error envelope:
#   {"error": {"code", "message", "details", "timestamp", "request_id"}}
#
# 🔗 Dependencies:
# FastAPI, starlette, garden_planner.shared.core.exceptions, garden_planner.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# garden_planner.main (handler and middleware registration)

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from garden_planner.shared.config.settings import get_settings
from garden_planner.shared.core.exceptions import GardenPlannerException

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the JSON error envelope shared by every error path."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": jsonable_encoder(details or {}),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
        headers={"X-Error-Code": code},
    )


async def garden_planner_exception_handler(request: Request, exc: GardenPlannerException) -> JSONResponse:
    """Render domain exceptions with their own status code and details."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")

    return error_response(request, exc.status_code, exc.error_code, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/query validation failures as 422 VALIDATION_ERROR."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GardenPlannerException, garden_planner_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware

    Domain exceptions are rendered by the registered exception handlers before they
    reach this point; anything else becomes a 500 INTERNAL_SERVER_ERROR envelope.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {exc}",
                exc_info=True,
            )

            details: Dict[str, Any] = {}
            if self.settings.DEBUG and not self.settings.is_production:
                details = {
                    "exception_type": type(exc).__name__,
                    "traceback": traceback.format_exc().split("\n"),
                }

            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_SERVER_ERROR",
                "An internal server error occurred",
                details,
            )
