"""
Animation scheduler: plays algorithm levels back as timed highlight frames.

Level i is applied i * delay seconds after start(). Applying a level makes
it the `current` set and adds it to `visited`, then notifies the frame
listener. Starting a new run or clearing cancels every pending timer of
the previous run first, so two runs never interleave.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from graphsim.animation.timers import ThreadingTimers, TimerBackend, TimerHandle
from graphsim.config import animation_delay_seconds

logger = logging.getLogger(__name__)


class AnimationPhase(Enum):
    """Scheduler lifecycle state."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class AnimationFrame:
    """
    Highlight state right after one level was applied.

    Attributes:
        index: 0-based level index
        current: Nodes highlighted as current in this frame
        visited: All nodes visited so far in this run
        total: Number of levels in the run
    """

    index: int
    current: frozenset[str]
    visited: frozenset[str]
    total: int

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1


FrameListener = Callable[[AnimationFrame], None]


class AnimationScheduler:
    """
    Turns an ordered list of levels into cancellable, delayed state updates.

    State machine:
    - IDLE: nothing pending
    - RUNNING: one timer per not-yet-applied level
    Cancelling (clear() or a new start()) drops every pending timer,
    empties `visited` and `current`, and returns to IDLE. When the final
    level fires the scheduler returns to IDLE and keeps the final
    highlight until it is cleared.

    Every timer is tagged with the run it belongs to. A callback from a
    superseded run is ignored even if its timer thread was already
    running when the run was cancelled.
    """

    def __init__(
        self,
        timers: TimerBackend | None = None,
        delay: float | None = None,
        on_frame: FrameListener | None = None,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            timers: Timer backend (default: real-time ThreadingTimers)
            delay: Seconds between consecutive levels (default from config)
            on_frame: Listener notified after each applied frame
        """
        self._timers = timers or ThreadingTimers()
        self._delay = animation_delay_seconds() if delay is None else delay
        self._listeners: list[FrameListener] = [on_frame] if on_frame else []

        self._lock = threading.RLock()
        self._finished = threading.Event()
        self._finished.set()

        self._run_id = 0
        self._levels: list[frozenset[str]] = []
        self._handles: list[TimerHandle] = []
        self._next_index = 0
        self._visited: set[str] = set()
        self._current: frozenset[str] = frozenset()
        self._phase = AnimationPhase.IDLE

    # =========================================================================
    # Observers
    # =========================================================================

    @property
    def phase(self) -> AnimationPhase:
        with self._lock:
            return self._phase

    @property
    def visited(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._visited)

    @property
    def current(self) -> frozenset[str]:
        with self._lock:
            return self._current

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def frames_applied(self) -> int:
        """Number of levels of the active run applied so far."""
        with self._lock:
            return self._next_index

    @property
    def pending_count(self) -> int:
        """Number of levels of the active run still waiting to fire."""
        with self._lock:
            return len(self._levels) - self._next_index

    def add_listener(self, listener: FrameListener) -> None:
        """Register a callback invoked after each applied frame."""
        with self._lock:
            self._listeners.append(listener)

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until the active run finishes or is cancelled.

        Only meaningful with a real-time backend.

        Returns:
            True if no run is in progress when this returns
        """
        return self._finished.wait(timeout)

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self, levels: Iterable[Sequence[str]]) -> int:
        """
        Cancel any active run and schedule a new one.

        Args:
            levels: Ordered node groups; level i fires at i * delay

        Returns:
            Number of frames scheduled
        """
        with self._lock:
            self._cancel()
            self._levels = [frozenset(level) for level in levels]
            if not self._levels:
                logger.debug("Animation started with no levels")
                return 0

            run_id = self._run_id
            self._phase = AnimationPhase.RUNNING
            self._finished.clear()
            for index in range(len(self._levels)):
                handle = self._timers.schedule(
                    index * self._delay,
                    lambda index=index: self._fire(run_id, index),
                )
                self._handles.append(handle)

            logger.debug(
                f"Animation run {run_id} scheduled: {len(self._levels)} levels, "
                f"{self._delay:.3f}s apart"
            )
            return len(self._levels)

    def clear(self) -> None:
        """Cancel any pending frames and clear all highlights. Idempotent."""
        with self._lock:
            self._cancel()

    def _cancel(self) -> None:
        """Enter the cancelled state and fall back to IDLE. Caller holds the lock."""
        cancelled = 0
        for handle in self._handles:
            if not handle.cancelled:
                handle.cancel()
                cancelled += 1
        if cancelled and self._phase is AnimationPhase.RUNNING:
            logger.debug(f"Animation run {self._run_id} cancelled ({cancelled} timers)")

        self._handles.clear()
        self._run_id += 1
        self._levels = []
        self._next_index = 0
        self._visited.clear()
        self._current = frozenset()
        self._phase = AnimationPhase.IDLE
        self._finished.set()

    def _fire(self, run_id: int, index: int) -> None:
        """
        Timer callback for level `index` of run `run_id`.

        Levels are applied strictly in order: a callback that arrives
        early first applies any earlier level that has not fired yet, and
        a callback whose level was already applied does nothing.
        """
        with self._lock:
            # a listener may cancel the run from inside _apply
            while run_id == self._run_id and self._next_index <= index:
                self._apply(self._next_index)

    def _apply(self, index: int) -> None:
        level = self._levels[index]
        self._current = level
        self._visited.update(level)
        self._next_index = index + 1

        frame = AnimationFrame(
            index=index,
            current=level,
            visited=frozenset(self._visited),
            total=len(self._levels),
        )
        if frame.is_last:
            self._handles.clear()
            self._phase = AnimationPhase.IDLE
            self._finished.set()
            logger.debug(f"Animation run {self._run_id} completed")

        for listener in list(self._listeners):
            listener(frame)
