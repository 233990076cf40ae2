"""Modal screens for the TUI.

This module hides how the settings panel is presented. The screen never
changes settings itself: it posts SettingChanged / CloseRequested and the
app forwards them to the conversation controller.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from ..conversation import Settings
from ..conversation.config import MODEL_LABELS
from .styles import SETTINGS_CSS


class SettingsScreen(ModalScreen[None]):
    """AI Settings dialog: model, max tokens and creativity."""

    CSS = SETTINGS_CSS

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    class SettingChanged(Message):
        """A control in the dialog changed value."""

        def __init__(self, name: str, value: str) -> None:
            super().__init__()
            self.name = name
            self.value = value

    class CloseRequested(Message):
        """The user asked to close the dialog."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    def compose(self) -> ComposeResult:
        settings = self._settings
        with Vertical(id="settings-dialog"):
            with Horizontal(id="settings-header"):
                yield Static("AI Settings", id="settings-title")
                yield Button("✖️", id="close-settings")
            with Vertical(classes="setting-group"):
                yield Label("Model:")
                yield Select(
                    [(label, name.value) for name, label in MODEL_LABELS.items()],
                    value=settings.model.value,
                    allow_blank=False,
                    id="model",
                )
            with Vertical(classes="setting-group"):
                yield Label(self._max_tokens_label(settings), id="max-tokens-label")
                yield Input(str(settings.max_tokens), type="integer", id="maxTokens")
            with Vertical(classes="setting-group"):
                yield Label(self._temperature_label(settings), id="temperature-label")
                yield Input(f"{settings.temperature:.1f}", type="number", id="temperature")

    @staticmethod
    def _max_tokens_label(settings: Settings) -> str:
        return f"Max Tokens: {settings.max_tokens}"

    @staticmethod
    def _temperature_label(settings: Settings) -> str:
        return f"Creativity: {settings.temperature:.1f}"

    def show_settings(self, settings: Settings) -> None:
        """Refresh the value labels from the current settings."""
        self._settings = settings
        if not self.is_mounted:
            return
        self.query_one("#max-tokens-label", Label).update(self._max_tokens_label(settings))
        self.query_one("#temperature-label", Label).update(self._temperature_label(settings))

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        if event.value is not Select.BLANK:
            self.post_message(self.SettingChanged("model", str(event.value)))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.input.id in ("maxTokens", "temperature"):
            self.post_message(self.SettingChanged(event.input.id, event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-settings":
            event.stop()
            self.action_close()

    def action_close(self) -> None:
        self.post_message(self.CloseRequested())
