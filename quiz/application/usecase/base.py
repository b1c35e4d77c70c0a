"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: one request model in, one response model out.

    Use cases call domain services and let domain errors propagate; the
    interface layer maps them to HTTP responses.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
