"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from replicator.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload.

    ``handle`` is the handle as of issuance; it may be stale by the time
    the token is read back.
    """

    user_id: int
    email: str
    name: Optional[str] = None
    handle: Optional[str] = None
    subject: Optional[str] = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: int,
    email: str,
    name: str | None,
    handle: str | None,
    settings: AuthSettings,
    subject: str | None = None,
    issued_at: datetime | None = None,
) -> str:
    """Create a session token for the user.

    Args:
        user_id: User ID
        email: Verified email address
        name: Display name, if any
        handle: Current handle, if any
        settings: Authentication settings
        subject: Identity provider subject, if known
        issued_at: Issuance time (defaults to now)

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.session_days)

    payload = {
        "user_id": user_id,
        "email": email,
        "name": name,
        "handle": handle,
        "subject": subject,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except (TypeError, ValueError):
        # Signed by us but with a payload shape we no longer accept
        raise JWTError("Malformed token payload")
