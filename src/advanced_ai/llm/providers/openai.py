from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Authentication mechanism
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model used when a call passes none
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using OpenAI.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            LLMResponse with generated content
        """
        openai_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in messages
        ]

        # Only include max_tokens if set
        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": openai_messages,
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        completion = await self._client.chat.completions.create(**request_params)

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=completion.model,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
