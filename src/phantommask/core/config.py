"""Core configuration - centralized config for the phantommask package.

All environment-based configuration should flow through this module.
This provides a single source of truth and consistent defaults.

Usage:
    from phantommask.core.config import get_config
    config = get_config()

    log_level = config.log_level

The protocol itself has no tunable parameters: the domain separator, key
and signature lengths are fixed constants and deliberately not settings.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigException

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("json", "text", "")


class CoreSettings(BaseSettings):
    """Core configuration settings for PhantomMask.

    Settings can be configured via environment variables with the
    PHANTOMMASK_ prefix, or from a local .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PHANTOMMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError("log_format must be 'json', 'text' or empty")
        return fmt


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the global configuration instance.

    Returns:
        The singleton CoreSettings instance.

    Raises:
        ConfigException: If an environment variable holds an invalid value.
    """
    global _config
    if _config is None:
        try:
            _config = CoreSettings()
        except ValidationError as e:
            first = e.errors()[0]
            setting = str(first["loc"][0]) if first.get("loc") else None
            raise ConfigException(f"Invalid configuration: {first['msg']}", setting=setting) from e
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
