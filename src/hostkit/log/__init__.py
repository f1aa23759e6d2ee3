"""Role-tagged logging on top of the stdlib logging package."""

from hostkit.log.formatter import RoleFormatter, record_site
from hostkit.log.logger import HostLogger, configure_logging

__all__ = [
    "HostLogger",
    "RoleFormatter",
    "configure_logging",
    "record_site",
]
