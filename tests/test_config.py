"""Tests for sparkpost_mail.config."""

from __future__ import annotations

from pydantic import SecretStr

from sparkpost_mail.config import LoggingConfig, SparkPostAPIConfig, TransmissionOptions


class TestTransmissionOptions:
    def test_defaults(self):
        cfg = TransmissionOptions()
        assert cfg.start_time == ""
        assert cfg.open_tracking is True
        assert cfg.click_tracking is True
        assert cfg.transactional is False
        assert cfg.sandbox is False
        assert cfg.skip_suppression is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SPARKPOST_OPTIONS_SANDBOX", "true")
        monkeypatch.setenv("SPARKPOST_OPTIONS_OPEN_TRACKING", "false")
        cfg = TransmissionOptions()
        assert cfg.sandbox is True
        assert cfg.open_tracking is False


class TestSparkPostAPIConfig:
    def test_defaults(self):
        cfg = SparkPostAPIConfig()
        assert cfg.base_url == "https://api.sparkpost.com"
        assert cfg.timeout_seconds == 30.0
        assert cfg.api_key is None

    def test_api_key_is_secret(self):
        cfg = SparkPostAPIConfig(api_key="hunter2")
        assert isinstance(cfg.api_key, SecretStr)
        assert "hunter2" not in repr(cfg)
        assert cfg.api_key.get_secret_value() == "hunter2"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SPARKPOST_API_BASE_URL", "https://api.eu.sparkpost.com")
        monkeypatch.setenv("SPARKPOST_API_TIMEOUT_SECONDS", "10")
        cfg = SparkPostAPIConfig()
        assert cfg.base_url == "https://api.eu.sparkpost.com"
        assert cfg.timeout_seconds == 10.0


class TestLoggingConfig:
    def test_defaults(self):
        cfg = LoggingConfig()
        assert cfg.json_output is True
        assert cfg.level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SPARKPOST_LOG_JSON_OUTPUT", "false")
        monkeypatch.setenv("SPARKPOST_LOG_LEVEL", "debug")
        cfg = LoggingConfig()
        assert cfg.json_output is False
        assert cfg.level == "debug"
