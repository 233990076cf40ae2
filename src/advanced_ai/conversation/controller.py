"""Conversation controller: the single owner of the application state.

Hides the request lifecycle behind submit():
- optimistic user message and "Generating....." placeholder
- the one-request-in-flight gate
- replacing the placeholder with the reply or a failure notice

Listeners receive the new AppState after every change, so a UI only has to
project the state it is handed.
"""

import itertools
from collections.abc import Callable
from typing import Any

from ..relay.models import Sender
from .config import FAILURE_TEXT, PLACEHOLDER_TEXT
from .models import AppState, Message
from .transport import RelayTransport

StateListener = Callable[[AppState], None]
DebugCallback = Callable[[str, str, str], None]


class ConversationController:
    """Drives one chat session against a relay transport."""

    def __init__(self, relay: RelayTransport, state: AppState | None = None) -> None:
        self._relay = relay
        self._state = state or AppState()
        start = max((msg.id for msg in self._state.messages), default=-1) + 1
        self._ids = itertools.count(start)
        self._listeners: list[StateListener] = []
        self._debug_callback: DebugCallback | None = None

    @property
    def state(self) -> AppState:
        """Current application state."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for request lifecycle tracing.

        Args:
            callback: Called as callback(level, component, message) with
                level one of "debug", "info", "warning", "error"
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Chat", message)

    def _update(self, **changes: Any) -> None:
        self._state = self._state.evolve(**changes)
        for listener in list(self._listeners):
            listener(self._state)

    def _message(self, text: str, sender: Sender) -> Message:
        return Message(id=next(self._ids), text=text, sender=sender)

    def _replace_placeholder(self, placeholder: Message, outcome: Message) -> None:
        remaining = tuple(msg for msg in self._state.messages if msg.id != placeholder.id)
        self._update(messages=remaining + (outcome,))

    async def submit(self, text: str) -> None:
        """Send one user message and wait for the reply.

        Ignored when the text is blank or a request is already in flight.
        The gate is checked and closed before the first await.
        """
        if not text.strip():
            return
        if self._state.loading:
            self._debug("debug", "Submit ignored: request in flight")
            return

        user_message = self._message(text, Sender.USER)
        placeholder = self._message(PLACEHOLDER_TEXT, Sender.SYSTEM)
        snapshot = self._state.messages + (user_message,)
        settings = self._state.settings
        self._update(messages=snapshot + (placeholder,), input="", loading=True)
        self._debug(
            "info",
            f"Request: {len(snapshot)} message(s), model={settings.model.value}, "
            f"max_tokens={settings.max_tokens}, temperature={settings.temperature:.1f}",
        )

        try:
            reply = await self._relay.send(snapshot, settings)
        except Exception as e:
            self._debug("error", f"Chat error: {e}")
            self._replace_placeholder(placeholder, self._message(FAILURE_TEXT, Sender.SYSTEM))
        else:
            self._debug("info", f"Reply: {len(reply)} chars")
            self._replace_placeholder(placeholder, self._message(reply, Sender.AI))
        finally:
            self._update(loading=False)

    def set_input(self, text: str) -> None:
        """Mirror the input field into the state."""
        if text != self._state.input:
            self._update(input=text)

    def update_setting(self, name: str, value: Any) -> None:
        """Change one setting; see Settings.merge for coercion rules."""
        settings = self._state.settings.merge(name, value)
        if settings != self._state.settings:
            self._debug("debug", f"Setting {name} -> {value!r}")
            self._update(settings=settings)

    def toggle_theme(self) -> None:
        self._update(theme=self._state.theme.toggled())

    def toggle_settings_panel(self) -> None:
        self._update(show_settings=not self._state.show_settings)
