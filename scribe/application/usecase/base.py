"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

import logfire

from scribe.application.usecase.result import Result, Unexpected


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Result:
        pass

    async def run(self, request: Any) -> Result:
        """Execute the use case, turning any failure into ``Unexpected``.

        Args:
            request: Use case request

        Returns:
            The use case result
        """
        try:
            return await self.execute(request)
        except Exception as e:
            logfire.exception(
                "Use case failed",
                use_case=type(self).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Unexpected(error=str(e), error_type=type(e).__name__)
