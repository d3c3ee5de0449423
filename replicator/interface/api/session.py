"""Session cookie transport."""

from fastapi import Request, Response

from replicator.config import Settings


def read_credential(request: Request, settings: Settings) -> str | None:
    """Read the session credential from the cookie or a Bearer header.

    Args:
        request: Incoming request
        settings: Application settings

    Returns:
        Raw credential, or None if the request carries none
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credential = authorization.partition(" ")
    if scheme.lower() == "bearer" and credential:
        return credential.strip()
    return None


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach a session credential to the response."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        max_age=settings.auth.session_days * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="strict",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(
        key=settings.auth.cookie_name,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="strict",
    )
