"""
Bearer-token identity.

Access tokens are issued elsewhere; this module only verifies them. A valid
token is an HS256 JWT carrying ``userId``, ``email``, ``type == "access"`` and
``exp``. The resolved identity is not re-checked against the users table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.config import get_settings
from app.constants.ids import MAX_ID
from app.exceptions import AuthError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"

bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    id: int
    email: Optional[str] = None


def decode_access_token(token: str) -> CurrentUser:
    """Verify signature, expiry and token type, and return the caller's identity."""
    settings = get_settings()
    try:
        payload: Dict[str, Any] = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        logger.info("Access token rejected: %s", e)
        raise AuthError("Invalid or expired token") from e

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise AuthError("Invalid or expired token")

    try:
        user_id = int(payload["userId"])
    except (KeyError, TypeError, ValueError) as e:
        raise AuthError("Invalid or expired token") from e
    if not 0 < user_id <= MAX_ID:
        raise AuthError("Invalid or expired token")

    return CurrentUser(id=user_id, email=payload.get("email"))


def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CurrentUser:
    """FastAPI dependency resolving the caller from the Authorization header."""
    if creds is None or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise AuthError("No token provided")
    return decode_access_token(creds.credentials)
