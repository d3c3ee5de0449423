"""User profile use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .suggest_handle import (
    SuggestHandleRequest,
    SuggestHandleResponse,
    SuggestHandleUseCase,
)
from .update_handle import (
    UpdateHandleRequest,
    UpdateHandleResponse,
    UpdateHandleUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "SuggestHandleRequest",
    "SuggestHandleResponse",
    "SuggestHandleUseCase",
    "UpdateHandleRequest",
    "UpdateHandleResponse",
    "UpdateHandleUseCase",
]
