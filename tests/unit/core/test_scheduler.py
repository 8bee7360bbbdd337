# tests/unit/core/test_scheduler.py
# Unit tests for the threading.Timer-backed scheduler

from threading import Event, current_thread, main_thread
from unittest.mock import MagicMock

from countdown.core.scheduler import ScheduledCall, Scheduler, ThreadingScheduler


class TestThreadingScheduler:

    # * Verify it satisfies the Scheduler protocol & returns a cancellable handle
    def test_implements_protocols(self):
        scheduler = ThreadingScheduler()
        assert isinstance(scheduler, Scheduler)

        handle = scheduler.schedule(10.0, MagicMock())
        try:
            assert isinstance(handle, ScheduledCall)
        finally:
            handle.cancel()

    # * Verify callback runs on a daemon background thread
    def test_runs_callback_on_background_thread(self):
        fired = Event()
        seen = {}

        def callback():
            seen["thread"] = current_thread()
            fired.set()

        ThreadingScheduler(name="sample").schedule(0.0, callback)

        assert fired.wait(2.0)
        assert seen["thread"] is not main_thread()
        assert seen["thread"].daemon is True
        assert seen["thread"].name == "sample-tick"

    # * Verify cancel prevents a pending callback from running
    def test_cancel_prevents_callback(self):
        callback = MagicMock()
        handle = ThreadingScheduler().schedule(0.2, callback)
        handle.cancel()

        Event().wait(0.4)
        callback.assert_not_called()

    # * Verify negative delays are clamped to run immediately
    def test_negative_delay_runs_immediately(self):
        fired = Event()
        ThreadingScheduler().schedule(-1.0, fired.set)
        assert fired.wait(2.0)
