"""Configuration module using Pydantic Settings.

Usage:
    from hostkit.config import HostSettings

    settings = HostSettings(role="client")
"""

from hostkit.config.settings import HostSettings

__all__ = [
    "HostSettings",
]
