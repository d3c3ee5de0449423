"""Authentication use cases."""

from .begin_login import BeginLoginRequest, BeginLoginResponse, BeginLoginUseCase
from .complete_login import (
    CompleteLoginRequest,
    CompleteLoginResponse,
    CompleteLoginUseCase,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

__all__ = [
    "BeginLoginRequest",
    "BeginLoginResponse",
    "BeginLoginUseCase",
    "CompleteLoginRequest",
    "CompleteLoginResponse",
    "CompleteLoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
]
