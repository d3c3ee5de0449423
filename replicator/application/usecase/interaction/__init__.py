"""Interaction use cases."""

from .create_interaction import (
    CreateInteractionRequest,
    CreateInteractionResponse,
    CreateInteractionUseCase,
)

__all__ = [
    "CreateInteractionRequest",
    "CreateInteractionResponse",
    "CreateInteractionUseCase",
]
