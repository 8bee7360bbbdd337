# countdown/core/scheduler.py
# Deferred-callback scheduling primitives consumed by CountdownTimer

from __future__ import annotations

from threading import Timer
from typing import Callable, Protocol, runtime_checkable


# * Handle for a pending scheduled callback
@runtime_checkable
class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


# * Anything that can run a callback after a delay (seconds) & hand back a cancel handle
@runtime_checkable
class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


# default scheduler: one daemon threading.Timer per firing
class ThreadingScheduler:
    def __init__(self, name: str = "countdown") -> None:
        self.name = name

    def schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(max(0.0, delay), callback)
        timer.daemon = True
        timer.name = f"{self.name}-tick"
        timer.start()
        return timer
