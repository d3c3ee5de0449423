"""Errors raised by outbound adapters."""

from typing import Optional


class AdapterError(Exception):
    """Base error for calls to systems outside this service."""


class ProviderError(AdapterError):
    """The identity provider failed or could not be reached.

    ``status_code`` is the provider's HTTP status when it answered at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
