# 📄 File: garden_planner/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the Garden Planner: what was asked, how it went and
# how long it took.
#
# 🧪 Purpose (Technical Summary):
# Request logging middleware with request id correlation (X-Request-ID), timing
# (X-Process-Time) and a slow request warning threshold.
#
# 🔗 Dependencies:
# FastAPI/Starlette, garden_planner.shared.utils.logging (request_id_var)
#
# 🔄 Connected Modules / Calls From:
# garden_planner.main (middleware registration)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from garden_planner.shared.utils.logging import request_id_var

from . import LOGGING_EXCLUDE_PATHS, should_exclude_path

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request id taken from X-Request-ID or generated
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id

        if should_exclude_path(request.url.path, LOGGING_EXCLUDE_PATHS):
            response = await call_next(request)
            response.headers[self.request_id_header] = request_id
            return response

        token = request_id_var.set(request_id)
        start_time = time.perf_counter()
        try:
            logger.info(f"➡️ {request.method} {request.url.path}")
            response = await call_next(request)

            processing_time = time.perf_counter() - start_time
            self._log_response(request, response.status_code, processing_time)

            response.headers[self.request_id_header] = request_id
            response.headers["X-Process-Time"] = f"{processing_time:.4f}"
            return response
        finally:
            request_id_var.reset(token)

    def _log_response(self, request: Request, status_code: int, processing_time: float) -> None:
        message = f"⬅️ {request.method} {request.url.path} {status_code} ({processing_time * 1000:.1f}ms)"

        if status_code >= 500:
            logger.error(message)
        elif processing_time > self.slow_request_threshold:
            logger.warning(f"🐢 Slow request: {message}")
        elif status_code >= 400:
            logger.info(message)
        else:
            logger.debug(message)
