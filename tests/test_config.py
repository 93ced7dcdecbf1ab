"""Tests for environment settings."""
import pytest

from config import load_settings
from errors import ConfigurationError

ENV_VARS = ("SETTLEUP_LOG_LEVEL", "SETTLEUP_HOST", "SETTLEUP_PORT", "SETTLEUP_CORS_ORIGINS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SETTLEUP_LOG_LEVEL", "debug")
    monkeypatch.setenv("SETTLEUP_PORT", "9000")
    monkeypatch.setenv("SETTLEUP_CORS_ORIGINS", "http://localhost:3000, https://example.com")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000
    assert settings.cors_origins == ["http://localhost:3000", "https://example.com"]


def test_single_origin(monkeypatch):
    monkeypatch.setenv("SETTLEUP_CORS_ORIGINS", "https://example.com")
    assert load_settings().cors_origins == ["https://example.com"]


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("SETTLEUP_PORT", "not-a-port")
    with pytest.raises(ConfigurationError):
        load_settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SETTLEUP_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        load_settings()
