"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases turn transport input (raw IDs and query strings) into domain
    values before any service or store is called.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
