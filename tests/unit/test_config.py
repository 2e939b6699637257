"""Test configuration module."""

import pytest
from pydantic import ValidationError

from aimlrelay.config import AppConfig


class TestAppConfig:
    """Test application configuration."""

    def test_should_load_default_values(self, monkeypatch):
        """Test default configuration."""
        for name in ("MODEL", "HTTP_PROXY", "http_proxy", "AIMLAPI_API_KEY"):
            monkeypatch.delenv(name, raising=False)
        config = AppConfig(_env_file=None)

        assert config.app_name == "AIMLRelay"
        assert config.default_model == "openai/gpt-4o"
        assert config.aimlapi_base_url == "https://api.aimlapi.com/v1"
        assert config.dry_run_prefix == "$DryRun$"
        assert config.stream_timeout_seconds is None
        assert config.has_proxy is False

    def test_should_read_environment(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("AIMLAPI_API_KEY", "env-key")
        monkeypatch.setenv("TOP_P", "0.5")
        monkeypatch.setenv("HTTP_PROXY", "http://proxy.test:3128")

        config = AppConfig(_env_file=None)

        assert config.aimlapi_api_key == "env-key"
        assert config.top_p == 0.5
        assert config.has_proxy is True

    def test_should_reject_empty_dry_run_prefix(self):
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, dry_run_prefix="")

    def test_should_reject_out_of_range_temperature(self):
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, temperature=2.5)

    def test_should_identify_development_environment(self):
        """Test environment detection."""
        config = AppConfig(_env_file=None, app_env="development")
        assert config.is_development is True
        assert config.is_production is False
