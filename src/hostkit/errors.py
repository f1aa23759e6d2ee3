"""Exception hierarchy for hostkit.

Host failures are never wrapped: they propagate as whatever the host raised,
except during the shutdown sweep where they are logged and collected.
"""

from __future__ import annotations


class HostkitError(Exception):
    """Base class for errors raised by hostkit itself."""


class RegistryClosedError(HostkitError):
    """Raised when a resource is created or tracked after the shutdown sweep began.

    The registry reopens on the next ``init()``.
    """


class UnknownHandleError(HostkitError, KeyError):
    """Raised by a host when a handle was never issued or is already gone."""

    def __init__(self, handle: object, kind: str = "object"):
        self.handle = handle
        self.kind = kind
        super().__init__(f"Unknown {kind} handle: {handle!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
