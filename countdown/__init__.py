# countdown/__init__.py
# Pausable countdown timer w/ drift-correcting tick scheduling

from .core.timer import CountdownTimer
from .core.types import Paused, Running, TimerState
from .core.scheduler import Scheduler, ScheduledCall, ThreadingScheduler
from .core.exceptions import (
    CountdownError,
    TimerError,
    TimerCancelledError,
    InvalidIntervalError,
    ConfigurationError,
    SettingsValidationError,
    JSONParsingError,
)

__version__ = "0.1.0"

__all__ = [
    "CountdownTimer",
    "Paused",
    "Running",
    "TimerState",
    "Scheduler",
    "ScheduledCall",
    "ThreadingScheduler",
    "CountdownError",
    "TimerError",
    "TimerCancelledError",
    "InvalidIntervalError",
    "ConfigurationError",
    "SettingsValidationError",
    "JSONParsingError",
]
