from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for completion providers.

    This module hides the design decision of which provider answers a chat
    request. Implementations own:
    - API client setup and authentication
    - Request/response format conversion

    Supports the async context manager protocol for resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Conversation history, system instruction first
            model: Model to use (None uses provider's default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            Exception: Provider-specific errors during generation
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the provider on exit.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race in httpx/anyio shutdown:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
