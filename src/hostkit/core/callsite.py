"""Call-site capture for log lines.

Usage:
    site = CallSite.here()           # location of this line
    site = CallSite.caller(depth=1)  # location of whoever called us
    str(site)                        # "script.py:42"
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallSite:
    """Source location shown at the end of a log line."""

    file: str = "?"
    line: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @property
    def known(self) -> bool:
        return self.file != "?"

    @classmethod
    def caller(cls, depth: int = 1) -> CallSite:
        """Location ``depth`` frames above the function calling this method.

        depth=0 is the calling function itself, depth=1 its caller, and so on.
        Falls back to ``UNKNOWN_SITE`` when the stack is not that deep or the
        interpreter does not expose frames.
        """
        try:
            frame = sys._getframe(depth + 1)
        except (AttributeError, ValueError):
            return UNKNOWN_SITE
        return cls(os.path.basename(frame.f_code.co_filename), frame.f_lineno)

    @classmethod
    def here(cls) -> CallSite:
        return cls.caller(depth=1)

    @classmethod
    def of(cls, func: object) -> CallSite:
        """Where func was defined, or ``UNKNOWN_SITE`` for builtins and callables without code."""
        code = getattr(func, "__code__", None)
        if code is None:
            return UNKNOWN_SITE
        return cls(os.path.basename(code.co_filename), code.co_firstlineno)


UNKNOWN_SITE = CallSite()
