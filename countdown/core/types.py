# countdown/core/types.py
# Core type definitions for the countdown timer state machine

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

# tick callback receives seconds left until finish
TickCallback = Callable[[float], None]
FinishCallback = Callable[[], None]

# monotonic time source, in seconds
Clock = Callable[[], float]


# * Timer is frozen w/ `remaining` seconds left (0.0 is a legal paused value)
@dataclass(frozen=True)
class Paused:
    remaining: float


# * Timer is counting down toward `deadline` on the monotonic clock
@dataclass(frozen=True)
class Running:
    deadline: float


TimerState = Union[Paused, Running]
