"""
Model provider base class and interface.

Sandi Metz Principles:
- Single Responsibility: Provider abstraction
- Interface Segregation: Minimal provider interface
- Dependency Inversion: Depend on abstraction, not concrete classes
"""

from abc import ABC, abstractmethod

from aimlrelay.llm.sink import EventSink
from aimlrelay.models.llm import UsageResult


class BaseModelProvider(ABC):
    """
    Abstract base class for streaming model providers.

    Defines interface that all providers must implement.
    """

    @abstractmethod
    async def answer(
        self,
        question: str,
        sink: EventSink,
        model: str | None = None,
        timeout: float | None = None,
    ) -> UsageResult:
        """
        Stream an answer to the sink and report its usage.

        Args:
            question: Question text
            sink: Push-style writer receiving server-sent events
            model: Optional model override
            timeout: Optional deadline in seconds for the streamed answer

        Returns:
            Priced usage record

        Raises:
            AppError: If planning, streaming or writing fails
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name (e.g., "aimlapi")
        """
        pass

    @abstractmethod
    def get_pricing(self) -> str:
        """
        Get human-readable pricing notes.

        Returns:
            Pricing description
        """
        pass

    def _build_error_message(self, error: BaseException, context: str) -> str:
        """
        Build error message with context.

        Args:
            error: The exception that occurred
            context: Context description

        Returns:
            Formatted error message
        """
        return f"{context}: {type(error).__name__} - {str(error)}"
