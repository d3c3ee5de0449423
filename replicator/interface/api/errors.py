"""Translation of domain and adapter errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from replicator.adapter.error import ProviderError
from replicator.domain.error import (
    AllocationExhaustedError,
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError | ProviderError) -> HTTPException:
    """Map a domain or provider error onto an HTTP status.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, ValidationError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, AuthenticationError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, ProviderError):
        return HTTPException(status.HTTP_502_BAD_GATEWAY, detail=str(error))
    if isinstance(error, AllocationExhaustedError):
        logfire.error("Handle allocation exhausted", attempts=error.attempts)
        return HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not generate a username, please try again",
        )

    logfire.error("Unmapped domain error", error=str(error), kind=type(error).__name__)
    return HTTPException(
        status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error"
    )
