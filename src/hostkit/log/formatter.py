from __future__ import annotations

import logging

from hostkit.core.callsite import UNKNOWN_SITE, CallSite
from hostkit.core.types import Role

_LEVEL_COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[37m",  # light gray
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[41m",  # red background
}
_RESET = "\033[0m"

# logging fills these in when it cannot find the caller's frame
_UNKNOWN_FILENAMES = {"(unknown file)", "?"}


def record_site(record: logging.LogRecord) -> CallSite:
    """Call site for a record: explicit ``callsite`` extra first, then the record's own frame info."""
    explicit = getattr(record, "callsite", None)
    if isinstance(explicit, CallSite):
        return explicit
    if record.filename in _UNKNOWN_FILENAMES or not record.lineno:
        return UNKNOWN_SITE
    return CallSite(record.filename, record.lineno)


class RoleFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] [ROLE] message (file:line)``.

    The role comes from the record's ``role`` attribute when the emitting
    HostLogger set one, otherwise from ``default_role``.
    """

    def __init__(self, default_role: Role = Role.SERVER, colored: bool = False) -> None:
        super().__init__()
        self.default_role = default_role
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.upper()
        if self.colored and level in _LEVEL_COLORS:
            level = f"{_LEVEL_COLORS[level]}{level}{_RESET}"
        role = getattr(record, "role", None) or self.default_role.tag
        line = f"[{level}] [{role}] {record.getMessage()} ({record_site(record)})"

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        if record.stack_info:
            line = f"{line}\n{self.formatStack(record.stack_info)}"
        return line
