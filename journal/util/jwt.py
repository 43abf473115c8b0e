"""JWT token utilities for moderator sessions."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from journal.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Moderator display name
    role: str
    exp: int


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(moderator: str, settings: AuthSettings) -> str:
    """Create a moderator session token.

    Args:
        moderator: Moderator display name
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(hours=settings.session_expiry_hours)

    payload = {
        "sub": moderator,
        "role": "moderator",
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a moderator session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or not a moderator token
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    decoded = TokenPayload(**payload)
    if decoded.role != "moderator":
        raise JWTError("Not a moderator token")
    return decoded
