# countdown/core/__init__.py
# Timer core: state machine, scheduling collaborators & exceptions (no CLI imports)

from .timer import CountdownTimer
from .types import Paused, Running, TimerState
from .scheduler import Scheduler, ScheduledCall, ThreadingScheduler

__all__ = [
    "CountdownTimer",
    "Paused",
    "Running",
    "TimerState",
    "Scheduler",
    "ScheduledCall",
    "ThreadingScheduler",
]
