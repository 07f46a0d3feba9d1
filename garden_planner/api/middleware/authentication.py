# 📄 File: garden_planner/api/middleware/authentication.py
# 🧭 Purpose (Layman Explanation):
# Checks the ID card (token) on each request and notes which gardener is asking, so
# every garden, bed and archive stays private to its owner.
#
# 🧪 Purpose (Technical Summary):
# Authentication middleware that reads a Bearer JWT, verifies it and stores the owner id
# on request.state and in the logging context. It never rejects a request itself;
# endpoints that need an owner depend on get_current_user, which raises 401.
#
# 🔗 Dependencies:
# FastAPI/Starlette, garden_planner.shared.core.security, garden_planner.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# garden_planner.main (middleware registration), shared.core.dependencies.get_current_user

import logging
from typing import Any, Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from garden_planner.shared.core.exceptions import AuthenticationError
from garden_planner.shared.core.security import verify_token
from garden_planner.shared.utils.logging import user_id_var

from . import PUBLIC_PATHS, should_exclude_path

logger = logging.getLogger(__name__)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Authentication middleware for JWT token validation

    This middleware:
    - Extracts a token from the Authorization header (Bearer) or X-Access-Token
    - Verifies it and stores the owner id on request.state
    - Leaves invalid or missing tokens anonymous for the endpoint to reject
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.public_paths = PUBLIC_PATHS

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.user_id = None
        request.state.token_payload = {}

        if should_exclude_path(request.url.path, self.public_paths):
            return await call_next(request)

        payload = self._authenticate(request)
        if payload is None:
            return await call_next(request)

        request.state.user_id = payload["sub"]
        request.state.token_payload = payload
        token = user_id_var.set(payload["sub"])
        try:
            return await call_next(request)
        finally:
            user_id_var.reset(token)

    def _authenticate(self, request: Request) -> Optional[Dict[str, Any]]:
        token = self._extract_token(request)
        if not token:
            return None

        try:
            return verify_token(token)
        except AuthenticationError as e:
            logger.info(f"Rejected token on {request.method} {request.url.path}: {e.message}")
            return None

    @staticmethod
    def _extract_token(request: Request) -> Optional[str]:
        """
        Extract JWT token from request headers

        Args:
            request: HTTP request

        Returns:
            JWT token string or None
        """
        authorization = request.headers.get("Authorization")
        if authorization:
            parts = authorization.split()
            if len(parts) == 2 and parts[0].lower() == "bearer":
                return parts[1]

        return request.headers.get("X-Access-Token")
