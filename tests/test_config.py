"""
Unit tests for configuration module.
"""
import pytest

from core.config import Settings, get_settings, reset_settings
from core.exceptions import ConfigurationError


def test_settings_defaults():
    """Test default configuration values."""
    settings = get_settings()
    assert settings.app_name == "Bank Message Parser"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.calendar_era_prefix == "14"


def test_settings_from_environment(monkeypatch):
    """Test values are read from environment variables."""
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CALENDAR_ERA_PREFIX", "13")

    settings = get_settings()
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.calendar_era_prefix == "13"


def test_settings_validation_port(monkeypatch):
    """Test port validation."""
    monkeypatch.setenv("PORT", "99999")

    with pytest.raises(ConfigurationError):
        get_settings()


def test_settings_validation_log_level(monkeypatch):
    """Test log level validation."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()
    assert exc_info.value.details["errors"]


@pytest.mark.parametrize("prefix", ["1", "140", "ab", "۱۴"])
def test_settings_validation_era_prefix(monkeypatch, prefix):
    """Test the era prefix must be two ASCII digits."""
    monkeypatch.setenv("CALENDAR_ERA_PREFIX", prefix)

    with pytest.raises(ConfigurationError):
        get_settings()


def test_settings_singleton():
    """Test settings singleton behavior."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2

    reset_settings()
    assert get_settings() is not settings1


def test_settings_direct_construction():
    """Test settings can be built directly with overrides."""
    settings = Settings(CALENDAR_ERA_PREFIX="15")
    assert settings.calendar_era_prefix == "15"
