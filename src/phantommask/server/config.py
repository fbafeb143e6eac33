# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Server configuration using pydantic-settings."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict

from phantommask.core.config import CoreSettings
from phantommask.core.exceptions import ConfigException

logger = logging.getLogger(__name__)


def get_package_version() -> str:
    """Get the package version from installed metadata.

    Returns the version from pyproject.toml when installed,
    or a dev fallback when running from source without install.
    """
    try:
        return version("phantommask")
    except PackageNotFoundError:
        return "0.0.0-dev"


class ServerSettings(CoreSettings):
    """Configuration for the PhantomMask HTTP API.

    Inherits core settings (logging) and adds server-specific settings.
    Settings can be configured via environment variables with PHANTOMMASK_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="PHANTOMMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=8740, description="Port to bind to")

    # CORS settings
    allowed_origins: list[str] = Field(
        default=[],
        description="Allowed CORS origins. Empty = same-origin only.",
    )

    # Include exception type in 500 responses
    debug: bool = Field(default=False, description="Expose exception types in error responses")

    server_name: str = Field(default="phantommask", description="Server name")
    server_version: str = Field(default_factory=get_package_version, description="Server version")


_settings: ServerSettings | None = None


def get_settings() -> ServerSettings:
    """Get the global server settings instance.

    Raises:
        ConfigException: If an environment variable holds an invalid value.
    """
    global _settings
    if _settings is None:
        try:
            _settings = ServerSettings()
        except ValidationError as e:
            first = e.errors()[0]
            setting = str(first["loc"][0]) if first.get("loc") else None
            raise ConfigException(f"Invalid server configuration: {first['msg']}", setting=setting) from e
    return _settings


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    global _settings
    _settings = None
