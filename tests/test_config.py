"""Tests for environment configuration."""
import pytest

from advanced_ai.config import AppConfig


class TestAppConfig:
    """Tests for AppConfig.from_env."""

    def test_defaults(self, monkeypatch):
        for name in ("RELAY_HOST", "RELAY_PORT", "RELAY_URL", "LOG_LEVEL", "CLIENT_BUNDLE_URL", "STATIC_DIR"):
            monkeypatch.delenv(name, raising=False)

        config = AppConfig.from_env()

        assert config.relay_host == "127.0.0.1"
        assert config.relay_port == 8000
        assert config.relay_url == "http://127.0.0.1:8000"
        assert config.log_level == "info"
        assert config.client_bundle_url == "/static/client.js"
        assert config.static_dir is None

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("RELAY_PORT", "9100")

        assert AppConfig.from_env().relay_port == 9100

    @pytest.mark.parametrize("value", ["abc", "", "80.5"])
    def test_bad_port_falls_back_to_default(self, monkeypatch, value):
        """The serverless handler imports config but never binds a port."""
        monkeypatch.setenv("RELAY_PORT", value)

        assert AppConfig.from_env().relay_port == 8000

    def test_blank_api_key_is_unset(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")

        assert AppConfig.from_env().openai_api_key is None
