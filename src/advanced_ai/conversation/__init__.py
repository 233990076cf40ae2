"""Client-side conversation state.

Module structure:
- config.py: fixed texts and labels
- models.py: Message, Settings, Theme and AppState
- transport.py: HTTP client for the relay
- controller.py: the state machine driving a chat session
"""

from ..relay.models import ModelName, Sender
from .controller import ConversationController
from .models import AppState, Message, Settings, Theme
from .transport import RelayClient, RelayError, RelayTransport

__all__ = [
    "AppState",
    "ConversationController",
    "Message",
    "ModelName",
    "RelayClient",
    "RelayError",
    "RelayTransport",
    "Sender",
    "Settings",
    "Theme",
]
