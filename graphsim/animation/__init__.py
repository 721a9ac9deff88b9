"""
Animation module.

Provides timed playback of algorithm levels:
- AnimationScheduler: Cancellable level-by-level highlight playback
- AnimationFrame: Highlight state after one level
- ThreadingTimers / ManualTimers: Real-time and virtual-clock backends
"""

from graphsim.animation.scheduler import AnimationFrame, AnimationPhase, AnimationScheduler
from graphsim.animation.timers import ManualTimers, ThreadingTimers, TimerBackend, TimerHandle

__all__ = [
    "AnimationFrame",
    "AnimationPhase",
    "AnimationScheduler",
    "ManualTimers",
    "ThreadingTimers",
    "TimerBackend",
    "TimerHandle",
]
