"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases that act on behalf of a signed-in caller."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
