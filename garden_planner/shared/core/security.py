"""
Security utilities for JWT creation and validation.
Resolves the opaque owner id that scopes every garden, bed and archive.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config.settings import get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class SecurityManager:
    """
    Centralized security manager for access tokens.
    Handles JWT encoding and verification with the configured secret.
    """

    def __init__(self):
        self.settings = get_settings()
        self.algorithm = self.settings.JWT_ALGORITHM
        self.secret_key = self.settings.JWT_SECRET_KEY
        self.access_token_expire_minutes = self.settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(
        self,
        subject: str,
        expires_delta: Optional[timedelta] = None,
        extra_claims: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Create JWT access token for an owner id.

        Args:
            subject: Owner id stored in the ``sub`` claim
            expires_delta: Custom expiration time
            extra_claims: Additional claims to embed

        Returns:
            str: Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        to_encode: Dict[str, Any] = dict(extra_claims or {})
        to_encode.update({
            "sub": str(subject),
            "exp": expire,
            "iat": now,
            "type": "access",
        })

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for owner: {subject}")
        return encoded_jwt

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT access token.

        Args:
            token: JWT token to verify

        Returns:
            dict: Decoded token payload

        Raises:
            AuthenticationError: If token is invalid, expired or has no subject
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials") from e

        if payload.get("type") != "access":
            logger.warning(f"Token type mismatch. Got: {payload.get('type')}")
            raise AuthenticationError("Could not validate credentials")

        if not payload.get("sub"):
            logger.warning("Token missing subject (owner id)")
            raise AuthenticationError("Could not validate credentials")

        return payload


@lru_cache()
def get_security_manager() -> SecurityManager:
    """Get the security manager singleton."""
    return SecurityManager()


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Convenience wrapper around SecurityManager.create_access_token."""
    return get_security_manager().create_access_token(subject, expires_delta)


def verify_token(token: str) -> Dict[str, Any]:
    """Convenience wrapper around SecurityManager.verify_token."""
    return get_security_manager().verify_token(token)
