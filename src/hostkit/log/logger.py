"""Role-tagged logging for scripts.

Usage:
    logger = HostLogger(HostSettings(role="client"))
    logger.log("spawned", model, "at", position)
    # [INFO] [CLIENT] spawned crate at Vector3(x=0.0, y=0.0, z=0.0) (script.py:12)

    logger.printf("player {name} joined", {"name": "ada"})
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import IO, Any

from hostkit.config import HostSettings
from hostkit.core.callsite import CallSite
from hostkit.core.template import format_template
from hostkit.core.types import Role
from hostkit.log.formatter import RoleFormatter


class HostLogger:
    """Thin wrapper over a stdlib logger that tags records with role and call site.

    The role is resolved once from settings at construction. The call site
    defaults to the code that called the public method; pass ``site`` to
    override it, or raise ``stacklevel`` when wrapping this logger in another
    helper.

    Args:
        settings: Source of role and logger name. Defaults to HostSettings().
        logger: Stdlib logger to emit on. Defaults to ``settings.logger_name``.
    """

    def __init__(
        self,
        settings: HostSettings | None = None,
        logger: logging.Logger | None = None,
    ):
        settings = settings or HostSettings()
        self._role = settings.role
        self._logger = logger or logging.getLogger(settings.logger_name)

    @property
    def role(self) -> Role:
        return self._role

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, *values: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        """Log values joined by spaces at INFO."""
        self._emit(logging.INFO, values, site, stacklevel)

    def debug(self, *values: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self._emit(logging.DEBUG, values, site, stacklevel)

    def warning(self, *values: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self._emit(logging.WARNING, values, site, stacklevel)

    def error(
        self,
        *values: Any,
        site: CallSite | None = None,
        stacklevel: int = 1,
        exc_info: bool = False,
    ) -> None:
        self._emit(logging.ERROR, values, site, stacklevel, exc_info=exc_info)

    def printf(
        self,
        template: str,
        substitutions: Mapping[Any, Any] | None = None,
        site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Format a ``{key}`` template and log the result at INFO."""
        if substitutions:
            substitutions = {k: _safe_str(v) for k, v in substitutions.items()}
        self._emit(logging.INFO, (format_template(template, substitutions),), site, stacklevel)

    def _emit(
        self,
        level: int,
        values: tuple[Any, ...],
        site: CallSite | None,
        stacklevel: int,
        exc_info: bool = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra: dict[str, Any] = {"role": self._role.tag}
        if site is not None:
            extra["callsite"] = site
        # +2 skips _emit and the public method
        self._logger.log(
            level,
            " ".join(_safe_str(v) for v in values),
            extra=extra,
            stacklevel=stacklevel + 2,
            exc_info=exc_info,
        )


def _safe_str(value: Any) -> str:
    """str(value), or a placeholder when its __str__ raises."""
    try:
        return str(value)
    except Exception:
        try:
            return f"<unprintable {type(value).__qualname__} object at {id(value):#x}>"
        except Exception:
            return "<unprintable object>"


def _have_role_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, RoleFormatter) for h in logger.handlers)


def configure_logging(
    settings: HostSettings | None = None, stream: IO[str] | None = None
) -> logging.Logger:
    """Attach a console handler with RoleFormatter to the hostkit logger.

    Idempotent across multiple calls: the level is updated every time, the
    handler is only added once.
    """
    settings = settings or HostSettings()
    logger = logging.getLogger(settings.logger_name)
    logger.setLevel(settings.log_level)

    if not _have_role_handler(logger):
        stream = stream or sys.stderr
        handler = logging.StreamHandler(stream=stream)
        colored = settings.use_color and hasattr(stream, "isatty") and stream.isatty()
        handler.setFormatter(RoleFormatter(default_role=settings.role, colored=colored))
        logger.addHandler(handler)

    return logger
