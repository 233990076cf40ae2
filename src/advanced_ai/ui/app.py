"""Main Textual TUI application.

Owns no conversation data of its own: user actions go to the
ConversationController, and every state change is projected back onto the
widgets in _render().
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Button, Footer

from ..conversation import AppState, ConversationController, RelayClient
from ..conversation.config import APP_TITLE
from .config import THEME_NAMES, LogLevel
from .screens import SettingsScreen
from .styles import APP_CSS
from .themes import THEMES
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TitleBar


class ChatApp(App):
    """Textual TUI for the Advanced AI chat."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "toggle_settings", "Settings"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        controller: ConversationController,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._settings_screen: SettingsScreen | None = None
        self._unsubscribe = None

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield TitleBar(id="title-bar")
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        for theme in THEMES:
            self.register_theme(theme)

        self._title_bar = self.query_one("#title-bar", TitleBar)
        self._chat = self.query_one("#chat-history", ChatHistoryWidget)
        self._input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        self._log_panel = log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route controller diagnostics to the log panel."""
            if level == "debug":
                log_panel.debug(component, message)
            elif level == "info":
                log_panel.info(component, message)
            elif level == "warning":
                log_panel.warning(component, message)
            elif level == "error":
                log_panel.error(component, message)

        self._controller.set_debug_callback(debug_callback)
        self._unsubscribe = self._controller.subscribe(self._render)
        self._render(self._controller.state)
        self._input_bar.focus_input()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._controller.set_debug_callback(None)

    def _render(self, state: AppState) -> None:
        """Project the conversation state onto the widgets."""
        self.theme = THEME_NAMES[state.theme.value]
        self._title_bar.show_theme(state.theme)
        self._chat.show_messages(state.messages)
        self._input_bar.show_value(state.input)
        self._input_bar.show_loading(state.loading)

        if state.show_settings and self._settings_screen is None:
            self._settings_screen = SettingsScreen(state.settings)
            self.push_screen(self._settings_screen)
        elif not state.show_settings and self._settings_screen is not None:
            self._settings_screen = None
            self.pop_screen()
        elif self._settings_screen is not None:
            self._settings_screen.show_settings(state.settings)

    def on_chat_input_bar_edited(self, event: ChatInputBar.Edited) -> None:
        self._controller.set_input(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        self._submit(event.value)

    @work(group="chat")
    async def _submit(self, text: str) -> None:
        """Run one submission as a background worker.

        Not exclusive: a second submit must reach the controller's gate
        instead of cancelling the request in flight.
        """
        await self._controller.submit(text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "settings-toggle":
            self.action_toggle_settings()
        elif event.button.id == "theme-toggle":
            self.action_toggle_theme()

    def on_settings_screen_setting_changed(self, event: SettingsScreen.SettingChanged) -> None:
        self._controller.update_setting(event.name, event.value)

    def on_settings_screen_close_requested(self, event: SettingsScreen.CloseRequested) -> None:
        if self._controller.state.show_settings:
            self._controller.toggle_settings_panel()

    def action_toggle_settings(self) -> None:
        self._controller.toggle_settings_panel()

    def action_toggle_theme(self) -> None:
        self._controller.toggle_theme()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self._log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_chat_tui(relay_url: str, log_level: str | None = None) -> None:
    """Run the chat TUI against a relay.

    Args:
        relay_url: Base URL of the relay server
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    async with RelayClient(relay_url) as relay:
        app = ChatApp(ConversationController(relay), log_level=log_level)
        with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
            await app.run_async()
