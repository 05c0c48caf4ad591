"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError, field_validator

from core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="Bank Message Parser", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Parsing
    # Two-digit years in compact date-time tokens are prefixed with this era.
    calendar_era_prefix: str = Field(default="14", alias="CALENDAR_ERA_PREFIX")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("calendar_era_prefix")
    @classmethod
    def validate_era_prefix(cls, v):
        """Validate the era prefix is exactly two ASCII digits."""
        v = v.strip()
        if len(v) != 2 or not v.isascii() or not v.isdigit():
            raise ValueError("Calendar era prefix must be exactly two digits")
        return v

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid application settings",
                details={"errors": [err["msg"] for err in e.errors()]}
            )
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
