"""
Configuration management using Pydantic Settings.

Loads CLI configuration from ``RUT_*`` environment variables and .env files
with validation and type conversion. The identifier module itself never
reads these settings; callers pass values explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rut import FormatStyle, check_separator


class RutSettings(BaseSettings):
    """
    Settings loaded from environment variables and .env files.

    Settings are loaded in this order of precedence:
    1. Environment variables (prefixed with RUT_)
    2. .env file in current directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Formatting Configuration
    default_style: FormatStyle = Field(
        default=FormatStyle.HUMAN,
        description="Output style when none is requested (human, simple, numeric)"
    )

    group_separator: str = Field(
        default=".",
        description="Group separator accepted when parsing RUT text"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(
        default="text",
        description="Log output format (json, text)"
    )

    # Service-specific Configuration
    service_name: str = Field(
        default="rut-id",
        description="Service name for logging"
    )

    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )

    @field_validator("default_style", mode="before")
    @classmethod
    def validate_default_style(cls, v):
        """Accept any style selector (e.g. "h", "default")."""
        return FormatStyle.from_selector(v)

    @field_validator("group_separator")
    @classmethod
    def validate_group_separator(cls, v):
        """Validate the separator the same way the parser does."""
        return check_separator(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format is supported."""
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {', '.join(sorted(valid_formats))}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment name."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of: {', '.join(sorted(valid_envs))}")
        return v.lower()


@lru_cache()
def get_settings() -> RutSettings:
    """
    Get cached settings instance.

    Uses LRU cache to avoid re-reading configuration files
    on every function call.

    Returns:
        RutSettings instance with loaded configuration
    """
    return RutSettings()


# Convenience function to get settings
def settings() -> RutSettings:
    """Get application settings."""
    return get_settings()
