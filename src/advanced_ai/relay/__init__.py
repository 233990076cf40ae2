"""Completion relay: the stateless server half of the chat.

Exposes the wire schemas and the relay core; the FastAPI app lives in
`advanced_ai.relay.server` and is imported on demand so the client side
never pulls in the web stack.
"""

from .models import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    ModelName,
    RelayMessage,
    RelaySettings,
    Sender,
)
from .service import SYSTEM_PROMPT, CompletionRelay

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "CompletionRelay",
    "ErrorResponse",
    "ModelName",
    "RelayMessage",
    "RelaySettings",
    "SYSTEM_PROMPT",
    "Sender",
]
