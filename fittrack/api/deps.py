"""Request dependencies shared by protected endpoints."""

import logging
import uuid

from fastapi import Header, HTTPException

from fittrack.core.security import TokenError, decode_access_token

logger = logging.getLogger(__name__)


async def get_current_user_id(authorization: str | None = Header(None)) -> uuid.UUID:
    """Resolve ``Authorization: Bearer <token>`` to the caller's user id."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header required")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid authorization header format")
    try:
        user_id, _email = decode_access_token(token.strip())
    except TokenError as e:
        logger.info("Rejected bearer token: %s", e)
        raise HTTPException(status_code=401, detail=str(e)) from e
    return user_id
