"""Lifecycle registry: tracks what a script created so it can be torn down.

LifecycleRegistry is a stateful service owning three collections:
active intervals, shutdown callbacks and live objects. A single
shutdown() drains them in a fixed order: callbacks, intervals, objects.

Usage:
    registry = LifecycleRegistry(LocalHost())
    handle = registry.create_interval(poll, 500)
    registry.on_shutdown(save_state)
    registry.track_object(crate)

    report = registry.shutdown()
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Any

from hostkit.core.callsite import CallSite
from hostkit.errors import RegistryClosedError
from hostkit.host.protocol import Host
from hostkit.lifecycle.models import (
    RegistryState,
    ShutdownFailure,
    ShutdownPhase,
    ShutdownReport,
)
from hostkit.log import HostLogger


class LifecycleRegistry:
    """Registry of intervals, shutdown callbacks and objects to clean up.

    Intervals and objects are kept in insertion-ordered dicts mapping each
    handle to the call site that created it, so the shutdown sweep tears
    them down in creation order and failures point back at the script.
    Handles are presence-checked before removal: clearing or untracking
    twice is a no-op.

    Outside of shutdown, host errors propagate and leave the registry
    unchanged for that call. During shutdown, each failing entry is logged,
    recorded in the ShutdownReport, and the sweep continues.

    Methods that record a call site take ``stacklevel`` like the logging
    API: 1 is the direct caller, raise it when wrapping the registry.

    Args:
        host: Scheduler and world API the registry drives.
        logger: Logger for debug traces and shutdown failures.
    """

    def __init__(self, host: Host, logger: HostLogger | None = None):
        self._host = host
        self._logger = logger or HostLogger()
        self._intervals: dict[Any, CallSite] = {}
        self._callbacks: list[Callable[[], Any]] = []
        self._objects: dict[Any, CallSite] = {}
        self._state = RegistryState.OPEN

    # Lifecycle

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_open(self) -> bool:
        """True while new intervals, callbacks and objects are accepted."""
        return self._state in (RegistryState.OPEN, RegistryState.DRAINING)

    def init(self) -> None:
        """Reopen a closed registry with empty collections. No-op when already open."""
        if self._state is RegistryState.CLOSED:
            self._intervals = {}
            self._callbacks = []
            self._objects = {}
            self._state = RegistryState.OPEN
            self._logger.debug("registry reopened")

    def require_open(self, what: str) -> None:
        """Raise RegistryClosedError unless the registry accepts new entries."""
        if not self.is_open:
            raise RegistryClosedError(
                f"Cannot {what}: registry is {self._state.name.lower()}, call init() first"
            )

    # Intervals

    def create_interval(
        self, func: Callable[[], Any], period_ms: float, stacklevel: int = 1
    ) -> Any:
        """Schedule func every period_ms milliseconds and track the handle.

        Raises:
            ValueError: If period_ms is not positive.
            RegistryClosedError: If the shutdown sweep has begun.
        """
        self.require_open("create interval")
        if period_ms <= 0:
            raise ValueError(f"Interval period must be positive, got {period_ms}")
        site = CallSite.caller(depth=stacklevel)
        handle = self._host.set_interval(func, period_ms)
        self._intervals[handle] = site
        self._logger.debug("interval", handle, "created every", period_ms, "ms", site=site)
        return handle

    def clear_interval(self, handle: Any, stacklevel: int = 1) -> None:
        """Cancel an interval on the host and stop tracking it."""
        self._host.clear_interval(handle)
        if self._intervals.pop(handle, None) is None:
            self._logger.debug(
                "interval", handle, "was not tracked", site=CallSite.caller(depth=stacklevel)
            )

    # Shutdown callbacks

    def on_shutdown(self, func: Callable[[], Any]) -> None:
        """Register func to run first during shutdown, after earlier registrations."""
        self.require_open("register shutdown callback")
        if func in self._callbacks:
            warnings.warn(
                f"Shutdown callback {getattr(func, '__qualname__', func)!r} registered "
                f"more than once; it will run once per registration.",
                stacklevel=2,
            )
        self._callbacks.append(func)

    def run_shutdown_callbacks(self) -> ShutdownReport:
        """Run every shutdown callback in registration order, then forget them.

        Callbacks registered while this runs are run too, after the others.
        A failing callback is logged and does not stop the rest.
        """
        report = ShutdownReport()
        self._run_callbacks(report)
        return report

    def _run_callbacks(self, report: ShutdownReport) -> None:
        while self._callbacks:
            func = self._callbacks.pop(0)
            try:
                func()
            except Exception as e:
                self._record_failure(report, ShutdownPhase.CALLBACKS, func, e, CallSite.of(func))
            else:
                report.callbacks_run += 1

    # Objects

    def track_object(self, handle: Any, stacklevel: int = 1) -> None:
        """Track an object for deletion at shutdown."""
        self.require_open("track object")
        self._objects[handle] = CallSite.caller(depth=stacklevel)

    def untrack_object(self, handle: Any, stacklevel: int = 1) -> None:
        """Stop tracking an object without deleting it."""
        if self._objects.pop(handle, None) is None:
            self._logger.debug(
                "object", handle, "was not tracked", site=CallSite.caller(depth=stacklevel)
            )

    def delete_object(self, handle: Any, stacklevel: int = 1) -> None:
        """Delete an object on the host and stop tracking it."""
        self._host.delete_entity(handle)
        self.untrack_object(handle, stacklevel=stacklevel + 1)

    # Shutdown

    def shutdown(self) -> ShutdownReport:
        """Drain all registries: callbacks, then intervals, then objects.

        Callbacks run first because user cleanup may itself create or
        destroy tracked resources. After the sweep every collection is empty
        and the registry is closed until init(). Calling shutdown() on a
        closed registry is a no-op returning an empty report.

        A callback raising SystemExit or KeyboardInterrupt stops the callback
        phase, but intervals and objects are still torn down and the registry
        still closes before the exception propagates.

        Returns:
            Report of what ran, what was torn down and what failed.
        """
        if self._state is not RegistryState.OPEN:
            self._logger.debug("shutdown skipped, registry is", self._state.name.lower())
            return ShutdownReport()

        report = ShutdownReport()
        self._state = RegistryState.DRAINING
        try:
            self._run_callbacks(report)
        finally:
            self._state = RegistryState.SWEEPING
            try:
                self._sweep_intervals(report)
                self._sweep_objects(report)
            finally:
                self._abandon_leftovers()
                self._state = RegistryState.CLOSED

        self._logger.debug(
            "shutdown complete:",
            report.callbacks_run,
            "callbacks,",
            len(report.intervals_cleared),
            "intervals,",
            len(report.objects_deleted),
            "objects,",
            len(report.failures),
            "failures",
        )
        return report

    def _sweep_intervals(self, report: ShutdownReport) -> None:
        for handle, site in list(self._intervals.items()):
            try:
                self._host.clear_interval(handle)
            except Exception as e:
                self._record_failure(report, ShutdownPhase.INTERVALS, handle, e, site)
            else:
                report.intervals_cleared.append(handle)
            finally:
                self._intervals.pop(handle, None)

    def _sweep_objects(self, report: ShutdownReport) -> None:
        for handle, site in list(self._objects.items()):
            try:
                self._host.delete_entity(handle)
            except Exception as e:
                self._record_failure(report, ShutdownPhase.OBJECTS, handle, e, site)
            else:
                report.objects_deleted.append(handle)
            finally:
                self._objects.pop(handle, None)

    def _abandon_leftovers(self) -> None:
        """Empty every collection; only non-empty when a sweep was interrupted."""
        leftovers = len(self)
        if leftovers:
            self._logger.warning("shutdown interrupted,", leftovers, "entries abandoned")
        self._callbacks.clear()
        self._intervals.clear()
        self._objects.clear()

    def _record_failure(
        self,
        report: ShutdownReport,
        phase: ShutdownPhase,
        target: Any,
        error: Exception,
        site: CallSite,
    ) -> None:
        report.failures.append(ShutdownFailure(phase=phase, target=target, error=error))
        self._logger.error(
            "shutdown",
            phase.name.lower(),
            "failed for",
            getattr(target, "__qualname__", target),
            f"({error!r})",
            exc_info=True,
            site=site,
        )

    # Introspection

    @property
    def intervals(self) -> tuple[Any, ...]:
        """Tracked interval handles in creation order."""
        return tuple(self._intervals)

    @property
    def callbacks(self) -> tuple[Callable[[], Any], ...]:
        return tuple(self._callbacks)

    @property
    def objects(self) -> tuple[Any, ...]:
        """Tracked object handles in creation order."""
        return tuple(self._objects)

    def site_of(self, handle: Any) -> CallSite | None:
        """Call site that created a tracked interval or object, None if untracked."""
        return self._intervals.get(handle) or self._objects.get(handle)

    def is_tracked(self, handle: Any) -> bool:
        return handle in self._intervals or handle in self._objects

    def __len__(self) -> int:
        return len(self._intervals) + len(self._callbacks) + len(self._objects)
