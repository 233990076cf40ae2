"""Terminal UI module.

Provides a Textual-based chat window over the conversation controller.

Module structure (each module hides a design decision):
- widgets.py: message bubbles, input bar, log panel
- screens.py: the settings dialog
- styles.py: CSS layout
- themes.py: dark and light palettes
- config.py: log levels and UI constants
- app.py: projecting controller state onto the widgets
"""

from .app import ChatApp, run_chat_tui
from .config import LogLevel
from .screens import SettingsScreen
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageBubble, TitleBar

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MessageBubble",
    "SettingsScreen",
    "TitleBar",
    "run_chat_tui",
]
