"""Shutdown phases and the report produced by a shutdown sweep.

Usage:
    report = registry.shutdown()
    if not report.ok:
        for failure in report.failures:
            print(failure.phase, failure.target, failure.error)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ShutdownPhase(Enum):
    """The three phases of a shutdown sweep, in execution order."""

    CALLBACKS = auto()
    """User shutdown callbacks, in registration order."""

    INTERVALS = auto()
    """Cancel every interval still tracked."""

    OBJECTS = auto()
    """Delete every object still tracked."""


class RegistryState(Enum):
    OPEN = auto()
    DRAINING = auto()
    """Shutdown callbacks are running; registration is still accepted."""
    SWEEPING = auto()
    """Automatic teardown is running; registration is refused."""
    CLOSED = auto()


@dataclass(frozen=True, slots=True)
class ShutdownFailure:
    """One entry that raised during a shutdown sweep."""

    phase: ShutdownPhase
    target: Any
    error: BaseException


@dataclass
class ShutdownReport:
    """Accumulated outcome of a shutdown sweep."""

    callbacks_run: int = 0
    intervals_cleared: list[Any] = field(default_factory=list)
    objects_deleted: list[Any] = field(default_factory=list)
    failures: list[ShutdownFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def is_empty(self) -> bool:
        """Check if the sweep had nothing to do.

        Returns:
            True if no callback ran and nothing was cleared, deleted or failed.
        """
        return (
            not self.callbacks_run
            and not self.intervals_cleared
            and not self.objects_deleted
            and not self.failures
        )

    def failures_in(self, phase: ShutdownPhase) -> list[ShutdownFailure]:
        return [f for f in self.failures if f.phase is phase]
