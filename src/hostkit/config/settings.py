"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from hostkit.config import HostSettings

    # Load from environment variables (HOSTKIT_*)
    settings = HostSettings()

    # Or override with explicit values
    settings = HostSettings(role="client", log_level="DEBUG")
"""

from __future__ import annotations

import logging

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install hostkit"
    ) from e

from pydantic import field_validator

from hostkit.core.types import Role


class HostSettings(BaseSettings):  # type: ignore[misc]
    """Process-wide configuration for a script context.

    Attributes:
        role: Whether the script runs on the client or the server build.
            Read once when a logger is built.
        log_level: Level name for the hostkit logger (DEBUG, INFO, ...).
        use_color: Colour the level name when logging to a terminal.
        logger_name: Name of the stdlib logger records are emitted on.
        default_bone: Skeleton bone used when attaching without a bone name.

    Environment Variables:
        HOSTKIT_ROLE
        HOSTKIT_LOG_LEVEL
        HOSTKIT_USE_COLOR
        HOSTKIT_LOGGER_NAME
        HOSTKIT_DEFAULT_BONE
    """

    model_config = SettingsConfigDict(
        env_prefix="HOSTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    role: Role = Role.SERVER
    log_level: str = "INFO"
    use_color: bool = False
    logger_name: str = "hostkit"
    default_bone: str = "hand_r"

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def is_client(self) -> bool:
        return self.role is Role.CLIENT
