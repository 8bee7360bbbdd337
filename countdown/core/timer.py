# countdown/core/timer.py
# Pausable countdown timer w/ self-correcting tick scheduling

from __future__ import annotations

import time
from contextlib import contextmanager
from functools import partial
from threading import RLock
from typing import Any, Callable, Iterator

from .exceptions import InvalidIntervalError, TimerCancelledError
from .scheduler import ScheduledCall, Scheduler, ThreadingScheduler
from .types import Clock, FinishCallback, Paused, Running, TickCallback, TimerState
from .verbose import vlog_schedule, vlog_tick, vlog_timer


class CountdownTimer:
    """Count down `total` seconds, calling `on_tick` every `interval` & `on_finish` at zero.

    The timer starts paused w/ the full duration left. `resume()` sets a deadline on
    the monotonic clock; `pause()` freezes whatever is left. Every state change,
    every scheduled firing & both callbacks run under one reentrant lock, so a
    callback never starts before the previous one has returned & callbacks may
    call `pause()`/`cancel()` on their own timer.

    Log lines are written only after the lock is released, so an output sink that
    takes its own lock (rich's Live display) never waits while holding this one.

    `cancel()` is terminal: resuming a cancelled timer raises TimerCancelledError.
    """

    def __init__(
        self,
        total: float,
        interval: float,
        on_tick: TickCallback,
        on_finish: FinishCallback,
        auto_start: bool = False,
        *,
        clock: Clock = time.monotonic,
        scheduler: Scheduler | None = None,
    ) -> None:
        if interval <= 0:
            raise InvalidIntervalError(
                f"interval must be positive, got {interval}", interval
            )
        self._total = float(total)
        self._interval = float(interval)
        self._on_tick = on_tick
        self._on_finish = on_finish
        self._auto_start = auto_start
        self._clock = clock
        self._scheduler: Scheduler = scheduler if scheduler is not None else ThreadingScheduler()

        self._lock = RLock()
        self._depth = 0
        self._logs: list[tuple[Callable[..., None], tuple[Any, ...]]] = []
        self._state: TimerState = Paused(max(0.0, self._total))
        self._pending: ScheduledCall | None = None
        # bumped on every pause/resume/cancel/finish; firings from older generations are dropped
        self._generation = 0
        self._created = False
        self._started = False
        self._finished = False
        self._cancelled = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(total={self._total!r}, "
            f"interval={self._interval!r}, state={self._state!r})"
        )

    # * Lifecycle

    # initialize once; finishes immediately for non-positive totals, else auto-starts if asked
    def create(self) -> "CountdownTimer":
        with self._locked():
            if self._created:
                return self
            self._created = True

            if self._total <= 0:
                self._state = Paused(0.0)
                self._finished = True
                self._log(vlog_timer, "finished on create", 0.0)
                self._on_finish()
                return self

            self._state = Paused(self._total)
            self._log(vlog_timer, "created", self._total)
            if self._auto_start:
                self.resume()
            return self

    # create (if needed) & start counting down
    def start(self) -> "CountdownTimer":
        with self._locked():
            self.create()
            self.resume()
            return self

    # freeze remaining time & drop the pending firing
    def pause(self) -> None:
        with self._locked():
            if self._finished or not isinstance(self._state, Running):
                return
            remaining = self._time_left_locked()
            self._state = Paused(remaining)
            self._generation += 1
            self._cancel_pending()
            self._log(vlog_timer, "paused", remaining)

    # restart counting from the frozen remaining time; an uncreated timer is created first
    def resume(self) -> None:
        with self._locked():
            if self._cancelled:
                raise TimerCancelledError("cannot resume a cancelled timer")
            if not self._created:
                self.create()
            if self._finished or not isinstance(self._state, Paused):
                return
            remaining = self._state.remaining
            self._state = Running(self._clock() + remaining)
            self._started = True
            self._generation += 1
            # zero delay: the tick handler owns all delivery decisions
            self._schedule(0.0)
            self._log(vlog_timer, "resumed", remaining)

    # stop delivering callbacks for good; remaining time & deadline are left untouched
    def cancel(self) -> None:
        with self._locked():
            if self._cancelled:
                return
            self._cancelled = True
            self._generation += 1
            self._cancel_pending()
            self._log(vlog_timer, "cancelled", self._time_left_locked())

    # * Queries

    def time_left(self) -> float:
        with self._lock:
            return self._time_left_locked()

    def time_passed(self) -> float:
        with self._lock:
            return self._total - self._time_left_locked()

    def total_countdown(self) -> float:
        return self._total

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def state(self) -> TimerState:
        with self._lock:
            return self._state

    def is_paused(self) -> bool:
        with self._lock:
            return isinstance(self._state, Paused)

    def is_running(self) -> bool:
        return not self.is_paused()

    # true once resume() has succeeded at least once
    def has_been_started(self) -> bool:
        with self._lock:
            return self._started

    def is_finished(self) -> bool:
        with self._lock:
            return self._finished

    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    # * Locking & deferred logging

    # hold the lock; queued log lines are flushed once the outermost hold is released
    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._lock:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
                logs: list[tuple[Callable[..., None], tuple[Any, ...]]] = []
                if self._depth == 0:
                    logs, self._logs = self._logs, []
        for log, args in logs:
            log(*args)

    def _log(self, log: Callable[..., None], *args: Any) -> None:
        self._logs.append((log, args))

    # * Scheduling loop

    def _time_left_locked(self) -> float:
        if isinstance(self._state, Paused):
            return self._state.remaining
        return max(0.0, self._state.deadline - self._clock())

    def _schedule(self, delay: float) -> None:
        self._pending = self._scheduler.schedule(
            delay, partial(self._handle_tick, self._generation)
        )

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    # one firing of the loop: finish, wait out the last partial interval, or tick & reschedule
    def _handle_tick(self, generation: int) -> None:
        with self._locked():
            if generation != self._generation or self._cancelled or self._finished:
                return
            if not isinstance(self._state, Running):
                return
            self._pending = None

            left = self._time_left_locked()
            if left <= 0:
                self._finished = True
                self._generation += 1
                self._log(vlog_timer, "finished", 0.0)
                self._on_finish()
                return

            if left < self._interval:
                # no tick for a partial interval, just wait until done
                self._log(vlog_schedule, left)
                self._schedule(left)
                return

            tick_start = self._clock()
            self._on_tick(left)
            took = self._clock() - tick_start
            self._log(vlog_tick, left, took)

            # callback paused or cancelled this timer
            if generation != self._generation:
                return

            delay = self._interval - took
            skipped = 0
            # callback overran the interval: skip whole intervals instead of catching up
            while delay < 0:
                delay += self._interval
                skipped += 1

            self._log(vlog_schedule, delay, skipped)
            self._schedule(delay)
