"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering (Markdown)
- Keyed reconciliation of the message list
- Input bar loading state
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Markdown, RichLog, Static

from ..conversation import Message, Theme
from ..conversation.config import APP_SUBTITLE, APP_TITLE, PLACEHOLDER_TEXT
from .config import INPUT_PLACEHOLDER, LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, SEND_LABEL, LogLevel


class TitleBar(Horizontal):
    """Settings toggle, app title and theme toggle."""

    def compose(self) -> ComposeResult:
        yield Button("⚙️", id="settings-toggle")
        with Vertical(id="title-block"):
            yield Static(APP_TITLE, id="app-title")
            yield Static(APP_SUBTITLE, id="app-subtitle")
        yield Button("☀️", id="theme-toggle")

    def show_theme(self, theme: Theme) -> None:
        """Theme button offers the opposite scheme."""
        self.query_one("#theme-toggle", Button).label = "☀️" if theme is Theme.DARK else "🌙"


class MessageBubble(Vertical):
    """One chat message, rendered as Markdown."""

    def __init__(self, message: Message) -> None:
        classes = f"message {message.sender.value}"
        if message.is_generating:
            classes += " generating"
        super().__init__(id=f"message-{message.id}", classes=classes)
        self.message = message

    def compose(self) -> ComposeResult:
        yield Markdown(self.message.text)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable message list kept in sync with the conversation state.

    Bubbles are keyed by message id: ids that disappear are unmounted,
    new ids are appended. Ids only grow, so appending keeps the order.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: dict[int, MessageBubble] = {}

    def show_messages(self, messages: Sequence[Message]) -> None:
        """Reconcile the displayed bubbles with the given messages."""
        wanted = {msg.id for msg in messages}
        for msg_id in [i for i in self._bubbles if i not in wanted]:
            self._bubbles.pop(msg_id).remove()

        added = False
        for msg in messages:
            if msg.id in self._bubbles:
                continue
            bubble = MessageBubble(msg)
            self._bubbles[msg.id] = bubble
            self.mount(bubble)
            added = True

        if added:
            self.scroll_end(animate=False)

    @property
    def message_ids(self) -> list[int]:
        """Ids of the displayed messages, in display order."""
        return list(self._bubbles)


class ChatInputBar(Horizontal):
    """Chat input bar with text field and Send button."""

    class Submitted(TextualMessage):
        """Posted when the user presses Enter or Send."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Edited(TextualMessage):
        """Posted on every change of the text field."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self) -> ComposeResult:
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button(SEND_LABEL, id="send-btn")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Edited(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.Submitted(self.query_one("#chat-input", Input).value))

    def show_value(self, value: str) -> None:
        text_input = self.query_one("#chat-input", Input)
        if text_input.value != value:
            text_input.value = value

    def show_loading(self, loading: bool) -> None:
        """Disable input while a reply is pending."""
        text_input = self.query_one("#chat-input", Input)
        button = self.query_one("#send-btn", Button)
        was_loading = text_input.disabled
        text_input.disabled = loading
        button.disabled = loading
        button.label = PLACEHOLDER_TEXT if loading else SEND_LABEL
        if was_loading and not loading:
            text_input.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "Chat": "green",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
