"""Unit tests for the conversation state machine."""
import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from advanced_ai.conversation import (
    AppState,
    ConversationController,
    Message,
    ModelName,
    RelayError,
    Sender,
    Settings,
    Theme,
)
from advanced_ai.conversation.config import FAILURE_TEXT, PLACEHOLDER_TEXT, WELCOME_TEXT

from conftest import FakeRelay


def _pairs(state: AppState) -> list[tuple[str, str]]:
    return [(msg.sender.value, msg.text) for msg in state.messages]


class TestInitialState:
    """Tests for the state a fresh controller starts from."""

    def test_welcome_message_only(self, controller):
        """A new session shows exactly one system welcome message."""
        state = controller.state

        assert _pairs(state) == [("system", WELCOME_TEXT)]
        assert state.messages[0].id == 0
        assert state.loading is False
        assert state.input == ""
        assert state.theme == Theme.DARK
        assert state.show_settings is False

    def test_default_settings(self, controller):
        """Settings default to gpt-4o-mini, 300 tokens, 0.7."""
        settings = controller.state.settings

        assert settings.model == ModelName.GPT_4O_MINI
        assert settings.max_tokens == 300
        assert settings.temperature == 0.7


class TestSubmit:
    """Tests for ConversationController.submit."""

    @pytest.mark.asyncio
    async def test_success_end_to_end(self, controller, fake_relay):
        """Hello -> Hi there! leaves welcome, user and ai messages."""
        await controller.submit("Hello")

        assert _pairs(controller.state) == [
            ("system", WELCOME_TEXT),
            ("user", "Hello"),
            ("ai", "Hi there!"),
        ]
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_failure_end_to_end(self, controller, fake_relay):
        """A rejected relay call leaves the fixed failure message."""
        fake_relay.error = RelayError("boom")

        await controller.submit("Hello")

        assert _pairs(controller.state) == [
            ("system", WELCOME_TEXT),
            ("user", "Hello"),
            ("system", FAILURE_TEXT),
        ]
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_unexpected_exception_still_resets(self, controller, fake_relay):
        """Any exception from the transport is treated as a relay failure."""
        fake_relay.error = KeyError("response")

        await controller.submit("Hello")

        assert controller.state.messages[-1].text == FAILURE_TEXT
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_placeholder_while_in_flight(self, controller, fake_relay):
        """User message and placeholder are visible before the reply arrives."""
        fake_relay.gate = asyncio.Event()
        task = asyncio.create_task(controller.submit("Hello"))
        await asyncio.sleep(0)

        state = controller.state
        assert _pairs(state)[-2:] == [("user", "Hello"), ("system", PLACEHOLDER_TEXT)]
        assert state.messages[-1].is_generating
        assert state.loading is True
        assert state.input == ""

        fake_relay.gate.set()
        await task

        assert not any(msg.is_generating for msg in controller.state.messages)

    @pytest.mark.asyncio
    async def test_snapshot_excludes_placeholder(self, controller, fake_relay):
        """The relay receives the log up to and including the user message."""
        await controller.submit("Hello")

        (snapshot, settings), = fake_relay.calls
        assert [(m.sender, m.text) for m in snapshot] == [
            (Sender.SYSTEM, WELCOME_TEXT),
            (Sender.USER, "Hello"),
        ]
        assert settings == controller.state.settings

    @pytest.mark.asyncio
    async def test_second_submit_ignored_while_loading(self, controller, fake_relay):
        """A submit during an outstanding request adds nothing and sends nothing."""
        fake_relay.gate = asyncio.Event()
        first = asyncio.create_task(controller.submit("Hello"))
        await asyncio.sleep(0)
        count_in_flight = len(controller.state.messages)

        await controller.submit("Again")

        assert len(controller.state.messages) == count_in_flight
        assert len(fake_relay.calls) == 1

        fake_relay.gate.set()
        await first
        assert _pairs(controller.state)[-2:] == [("user", "Hello"), ("ai", "Hi there!")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_input_is_noop(self, controller, fake_relay, text):
        """Blank input neither changes state nor calls the relay."""
        before = controller.state

        await controller.submit(text)

        assert controller.state is before
        assert fake_relay.calls == []

    @pytest.mark.asyncio
    async def test_text_is_sent_untrimmed(self, controller, fake_relay):
        """Only the emptiness check trims; the message keeps its text."""
        await controller.submit("  Hello  ")

        assert controller.state.messages[1].text == "  Hello  "

    @pytest.mark.asyncio
    async def test_ids_strictly_increase(self, controller):
        """Ids grow in insertion order across several exchanges."""
        for text in ("one", "two", "three"):
            await controller.submit(text)

        ids = [msg.id for msg in controller.state.messages]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_listeners_see_every_phase(self, controller):
        """Subscribers observe loading on and off around the request."""
        seen: list[bool] = []
        unsubscribe = controller.subscribe(lambda state: seen.append(state.loading))

        await controller.submit("Hello")
        unsubscribe()
        await controller.submit("Again")

        assert seen[0] is True
        assert seen[-1] is False
        assert len(seen) == 3

    @pytest.mark.asyncio
    async def test_debug_callback_reports_failure(self, controller, fake_relay):
        """The debug hook receives an error entry when the relay fails."""
        fake_relay.error = RelayError("unreachable")
        entries: list[tuple[str, str, str]] = []
        controller.set_debug_callback(lambda *entry: entries.append(entry))

        await controller.submit("Hello")

        assert ("error", "Chat", "Chat error: unreachable") in entries

    @pytest.mark.asyncio
    async def test_resumes_ids_from_given_state(self):
        """A controller seeded with a state continues after its highest id."""
        state = AppState(messages=(Message(id=41, text="earlier", sender=Sender.AI),))
        controller = ConversationController(FakeRelay(), state=state)

        await controller.submit("Hello")

        assert [msg.id for msg in controller.state.messages] == [41, 42, 44]

    @given(st.text(min_size=1).filter(lambda s: s.strip()))
    def test_net_two_messages_per_exchange(self, text: str):
        """Property test: every non-blank submit nets +2 messages."""
        for relay in (FakeRelay(), FakeRelay(error=RelayError("down"))):
            controller = ConversationController(relay)
            before = len(controller.state.messages)

            asyncio.run(controller.submit(text))

            assert len(controller.state.messages) == before + 2
            assert controller.state.messages[-2].text == text
            assert controller.state.loading is False


class TestSettings:
    """Tests for settings coercion."""

    def test_max_tokens_string_becomes_int(self, controller):
        controller.update_setting("maxTokens", "250")

        assert controller.state.settings.max_tokens == 250
        assert isinstance(controller.state.settings.max_tokens, int)

    def test_temperature_string_becomes_float(self, controller):
        controller.update_setting("temperature", "0.3")

        assert controller.state.settings.temperature == 0.3
        assert isinstance(controller.state.settings.temperature, float)

    def test_model_passthrough(self, controller):
        controller.update_setting("model", "gpt-3.5-turbo")

        assert controller.state.settings.model == ModelName.GPT_35_TURBO

    def test_update_is_immutable(self, controller):
        """The previous Settings value is left untouched."""
        before = controller.state.settings

        controller.update_setting("maxTokens", "120")

        assert before.max_tokens == 300
        assert controller.state.settings is not before

    @pytest.mark.parametrize("name,value", [
        ("maxTokens", "abc"),
        ("maxTokens", ""),
        ("temperature", "nan"),
        ("temperature", None),
        ("model", "gpt-2"),
    ])
    def test_malformed_values_leave_setting_unchanged(self, name, value):
        assert Settings().merge(name, value) == Settings()

    @pytest.mark.parametrize("name,value,field,expected", [
        ("maxTokens", "10", "max_tokens", 50),
        ("maxTokens", "9000", "max_tokens", 500),
        ("maxTokens", "249.6", "max_tokens", 250),
        ("temperature", "-1", "temperature", 0.0),
        ("temperature", "1.5", "temperature", 1.0),
    ])
    def test_out_of_range_values_are_clamped(self, name, value, field, expected):
        assert getattr(Settings().merge(name, value), field) == expected

    def test_unknown_setting_raises(self):
        with pytest.raises(ValueError, match="Unknown setting"):
            Settings().merge("topP", "0.9")

    @given(st.one_of(st.text(), st.integers(), st.floats(), st.none()))
    def test_coercion_never_raises(self, value):
        """Property test: any slider value yields valid settings."""
        for name in ("maxTokens", "temperature", "model"):
            settings = Settings().merge(name, value)
            assert 50 <= settings.max_tokens <= 500
            assert 0.0 <= settings.temperature <= 1.0


class TestToggles:
    """Tests for the pure UI toggles."""

    def test_toggle_theme(self, controller):
        controller.toggle_theme()
        assert controller.state.theme == Theme.LIGHT

        controller.toggle_theme()
        assert controller.state.theme == Theme.DARK

    def test_toggle_settings_panel(self, controller):
        controller.toggle_settings_panel()
        assert controller.state.show_settings is True

        controller.toggle_settings_panel()
        assert controller.state.show_settings is False

    def test_set_input(self, controller):
        controller.set_input("draft")
        assert controller.state.input == "draft"
