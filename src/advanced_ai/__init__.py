"""
Advanced AI: a chat client and a stateless completion relay.

Each subpackage hides one design decision:
- llm: which completion provider answers and how it is called
- conversation: the client-side conversation state machine
- relay: the HTTP boundary in front of the provider
- ui: how the conversation state is drawn in the terminal
"""

__version__ = "0.1.0"

from .conversation import AppState, ConversationController, Message, Sender, Settings
from .relay import ChatRequest, ChatResponse, CompletionRelay

__all__ = [
    "AppState",
    "ChatRequest",
    "ChatResponse",
    "CompletionRelay",
    "ConversationController",
    "Message",
    "Sender",
    "Settings",
]
