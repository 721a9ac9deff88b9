"""
Timer backends for the animation scheduler.

A backend schedules a callback after a delay and returns a handle that
can cancel it. Two implementations are provided:
- ThreadingTimers: real wall-clock delays drained by one worker thread
- ManualTimers: a virtual clock advanced explicitly (tests, instant playback)
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)


class TimerHandle(ABC):
    """A scheduled callback that can be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        ...


class TimerBackend(ABC):
    """
    Abstract source of delayed callbacks.

    Implementations must run callbacks scheduled with a shorter delay no
    later than those scheduled with a longer delay.
    """

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Run `callback` after `delay` seconds.

        Args:
            delay: Seconds from now (0 means as soon as possible)
            callback: Zero-argument function to invoke

        Returns:
            Handle for cancelling the callback
        """
        ...


class _QueuedHandle(TimerHandle):
    """Heap entry payload shared by both backends."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


# =============================================================================
# Real-time backend
# =============================================================================


class ThreadingTimers(TimerBackend):
    """
    Wall-clock timers drained by a single daemon worker thread.

    Scheduled callbacks wait in a heap ordered by (due time, scheduling
    order), so a run of thousands of levels still uses one thread. The
    worker starts on the first schedule() call. Callbacks run on the
    worker thread, so consumers must synchronize, and a slow callback
    delays the ones behind it.
    """

    def __init__(self) -> None:
        self._queue: list[tuple[float, int, _QueuedHandle]] = []
        self._counter = itertools.count()
        self._wakeup = threading.Condition()
        self._worker: threading.Thread | None = None

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are neither fired nor cancelled."""
        with self._wakeup:
            return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _QueuedHandle(time.monotonic() + max(0.0, delay), callback)
        with self._wakeup:
            heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
            if self._worker is None:
                self._worker = threading.Thread(
                    target=self._run, name="graphsim-timers", daemon=True
                )
                self._worker.start()
            self._wakeup.notify()
        return handle

    def _next_due(self) -> _QueuedHandle:
        """Block until the head of the queue is due, then pop it. Caller holds the lock."""
        while True:
            while self._queue and self._queue[0][2].cancelled:
                heapq.heappop(self._queue)
            if not self._queue:
                self._wakeup.wait()
                continue
            remaining = self._queue[0][0] - time.monotonic()
            if remaining <= 0:
                return heapq.heappop(self._queue)[2]
            self._wakeup.wait(remaining)

    def _run(self) -> None:
        while True:
            with self._wakeup:
                handle = self._next_due()
            # run outside the lock: callbacks may schedule or cancel timers
            try:
                handle.callback()
            except Exception:
                logger.exception("Timer callback failed")


# =============================================================================
# Virtual-clock backend
# =============================================================================


class ManualTimers(TimerBackend):
    """
    Deterministic timers driven by an explicit virtual clock.

    Nothing fires until advance() or run_all() is called. Due callbacks
    fire in (due time, scheduling order).

    Usage:
        timers = ManualTimers()
        timers.schedule(0.7, callback)
        timers.advance(0.7)  # callback runs here
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, _QueuedHandle]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are neither fired nor cancelled."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _QueuedHandle(self._now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire everything that became due.

        Returns:
            Number of callbacks fired
        """
        return self._advance_to(self._now + max(0.0, seconds))

    def run_all(self) -> int:
        """Fire every pending callback, advancing the clock as needed."""
        fired = 0
        while self._queue:
            fired += self._advance_to(self._queue[0][0])
        return fired

    def _advance_to(self, target: float) -> int:
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            self._now = due
            if handle.cancelled:
                continue
            handle.callback()
            fired += 1
        self._now = max(self._now, target)
        return fired
