"""
FastAPI dependencies shared across modules.
Resolves the current owner from request state populated by AuthenticationMiddleware.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class CurrentUser:
    """Owner information extracted from the JWT token."""

    def __init__(self, user_id: str, token_payload: Optional[Dict[str, Any]] = None):
        self.user_id = user_id
        self.token_payload = token_payload or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert user info to dictionary."""
        return {"user_id": self.user_id}


async def get_current_user(request: Request) -> CurrentUser:
    """
    Get current authenticated user from request state.
    This dependency assumes AuthenticationMiddleware has already validated the token.

    Args:
        request: FastAPI request object

    Returns:
        CurrentUser: Current user information

    Raises:
        AuthenticationError: If user is not authenticated
    """
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        logger.info(f"Unauthenticated request to {request.url.path}")
        raise AuthenticationError()

    return CurrentUser(
        user_id=user_id,
        token_payload=getattr(request.state, "token_payload", {}),
    )
