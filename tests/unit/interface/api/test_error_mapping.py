"""Unit tests for HTTP error translation and cookie transport."""

import pytest
from fastapi import Response
from starlette.requests import Request

from replicator.adapter.error import ProviderError
from replicator.config import Settings
from replicator.domain.error import (
    AllocationExhaustedError,
    DomainError,
    DuplicateInteractionError,
    EmptyContentError,
    HandleTakenError,
    InvalidCodeError,
    InvalidHandleFormatError,
    InvalidInteractionTypeError,
    NotFoundError,
    UnauthenticatedError,
)
from replicator.interface.api.errors import to_http_exception
from replicator.interface.api.session import read_credential, set_session_cookie


@pytest.mark.parametrize(
    "error,status_code",
    [
        (EmptyContentError(), 400),
        (InvalidHandleFormatError("Username is required"), 400),
        (InvalidInteractionTypeError("like"), 400),
        (UnauthenticatedError(), 401),
        (InvalidCodeError(), 401),
        (NotFoundError("Meme", "9"), 404),
        (DuplicateInteractionError(1, 2, "praise"), 409),
        (HandleTakenError("ada"), 409),
        (ProviderError("down"), 502),
        (AllocationExhaustedError(25), 500),
        (DomainError("boom"), 500),
    ],
)
def test_error_status_codes(error, status_code):
    """Each error family maps onto its HTTP status."""
    assert to_http_exception(error).status_code == status_code


def test_conflict_detail_is_user_facing():
    """Conflict messages are passed through as the response detail."""
    exc = to_http_exception(HandleTakenError("ada"))

    assert exc.detail == "That username is already taken"


def _request(headers: dict[str, str]) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in headers.items()
            ],
        }
    )


class TestCredentialTransport:
    """Tests for reading and writing the session credential."""

    def test_cookie_is_preferred(self):
        settings = Settings()
        request = _request(
            {"Cookie": "session=from-cookie", "Authorization": "Bearer from-header"}
        )

        assert read_credential(request, settings) == "from-cookie"

    def test_bearer_header_is_accepted(self):
        settings = Settings()
        request = _request({"Authorization": "Bearer abc.def.ghi"})

        assert read_credential(request, settings) == "abc.def.ghi"

    def test_no_credential(self):
        settings = Settings()

        assert read_credential(_request({}), settings) is None
        assert read_credential(_request({"Authorization": "Basic xyz"}), settings) is None

    def test_cookie_attributes(self):
        """The cookie is HttpOnly, SameSite=Strict and lives for the session window."""
        settings = Settings(environment="development")
        response = Response()

        set_session_cookie(response, "tok", settings)

        header = response.headers["set-cookie"]
        assert header.startswith("session=tok;")
        assert "HttpOnly" in header
        assert "SameSite=strict" in header
        assert f"Max-Age={30 * 24 * 60 * 60}" in header
        assert "Secure" not in header

    def test_cookie_is_secure_over_https(self):
        settings = Settings(environment="production", host="api.memes.example")
        response = Response()

        set_session_cookie(response, "tok", settings)

        assert "Secure" in response.headers["set-cookie"]
