"""Completion relay core.

Hides how a conversation snapshot becomes a provider request:
- sender to role mapping
- the fixed system instruction
- settings defaults
The HTTP layer in server.py only parses and serializes.
"""

import logging

from ..llm import ChatMessage, LLMProvider
from .models import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    ChatRequest,
    ChatResponse,
    RelayMessage,
    Sender,
)

logger = logging.getLogger("advanced_ai.relay")

SYSTEM_PROMPT = (
    "You are an advanced AI assistant named Advanced AI. "
    "Be helpful, creative, and precise. "
    "Use markdown for formatting complex responses."
)


class CompletionRelay:
    """Stateless pass-through from a chat snapshot to a completion provider."""

    def __init__(self, llm: LLMProvider, system_prompt: str = SYSTEM_PROMPT) -> None:
        self._llm = llm
        self._system_prompt = system_prompt

    @staticmethod
    def to_provider_messages(messages: list[RelayMessage]) -> list[ChatMessage]:
        """Map snapshot entries to provider roles.

        Only user messages keep the "user" role; ai and system entries
        (the welcome message included) are sent as "assistant".
        """
        return [
            ChatMessage(
                role="user" if msg.sender == Sender.USER else "assistant",
                content=msg.text,
            )
            for msg in messages
        ]

    async def complete(self, request: ChatRequest) -> ChatResponse:
        """Forward one snapshot to the provider and return its reply.

        Provider errors propagate to the caller unchanged.
        """
        settings = request.settings
        model = DEFAULT_MODEL.value
        max_tokens = DEFAULT_MAX_TOKENS
        temperature = DEFAULT_TEMPERATURE
        if settings is not None:
            if settings.model is not None:
                model = settings.model.value
            if settings.max_tokens is not None:
                max_tokens = settings.max_tokens
            if settings.temperature is not None:
                temperature = settings.temperature

        messages = [ChatMessage(role="system", content=self._system_prompt)]
        messages.extend(self.to_provider_messages(request.messages))

        logger.info(
            "Relaying %d message(s): model=%s max_tokens=%d temperature=%.2f",
            len(request.messages),
            model,
            max_tokens,
            temperature,
        )
        result = await self._llm.chat_completion(
            messages,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        logger.debug("Provider replied with %d chars (usage=%s)", len(result.content), result.usage)
        return ChatResponse(response=result.content)
