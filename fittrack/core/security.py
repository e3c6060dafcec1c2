"""Security utilities (passwords, JWT)."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from fittrack.core.config import get_settings

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class TokenError(Exception):
    """Raised when a bearer token is missing claims, malformed or expired."""


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def create_access_token(user_id: uuid.UUID, email: str, expires_in: timedelta | None = None) -> str:
    """Sign a token carrying the user id (sub) and email."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = timedelta(hours=settings.jwt_expire_hours)
    claims = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> tuple[uuid.UUID, str]:
    """Return (user_id, email) from a token signed by create_access_token."""
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise TokenError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise TokenError("Invalid token") from e
    try:
        return uuid.UUID(claims["sub"]), claims.get("email", "")
    except (KeyError, ValueError) as e:
        raise TokenError("Invalid token claims") from e
