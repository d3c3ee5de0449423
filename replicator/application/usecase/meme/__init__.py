"""Meme use cases."""

from .create_meme import CreateMemeRequest, CreateMemeResponse, CreateMemeUseCase
from .list_memes import (
    InteractionView,
    ListMemesRequest,
    ListMemesResponse,
    ListMemesUseCase,
    MemeView,
)

__all__ = [
    "CreateMemeRequest",
    "CreateMemeResponse",
    "CreateMemeUseCase",
    "InteractionView",
    "ListMemesRequest",
    "ListMemesResponse",
    "ListMemesUseCase",
    "MemeView",
]
