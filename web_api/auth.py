"""
Bearer token verification.

Sign-in happens with the external identity provider; requests carry the
access token it issued. We only verify the token and read its claims.
"""

import logging
import os

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "authenticated")

_bearer = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict | None:
    """
    Verify an access token and return its claims.

    Returns None for any invalid, expired or unverifiable token.
    """
    secret = os.environ.get("JWT_SECRET")
    if not secret:
        logger.warning("JWT_SECRET is not set; treating request as anonymous")
        return None

    try:
        claims = jwt.decode(
            token, secret, algorithms=[JWT_ALGORITHM], audience=JWT_AUDIENCE
        )
    except jwt.InvalidTokenError as e:
        logger.info("Rejected access token: %s", e)
        return None

    if not claims.get("sub"):
        return None
    return claims


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> dict | None:
    """Claims of the signed-in user, or None for anonymous requests."""
    if credentials is None:
        return None
    return decode_token(credentials.credentials)


async def get_current_user(user: dict | None = Depends(get_optional_user)) -> dict:
    """Claims of the signed-in user. 401 if the request isn't authenticated."""
    if user is None:
        raise HTTPException(401, "Not authenticated")
    return user
