# tests/unit/cli/test_output_manager.py
# Unit tests for OutputManager implementation

from pathlib import Path
from unittest.mock import patch

from countdown.cli.output_manager import OutputManager
from countdown.core.output import OutputInterface, OutputLevel


class TestOutputManagerBasics:

    # * Verify OutputManager implements protocol
    def test_implements_protocol(self):
        assert isinstance(OutputManager(), OutputInterface)

    # * Verify default level is NORMAL
    def test_default_level_is_normal(self):
        assert OutputManager().get_level() == OutputLevel.NORMAL


class TestInitialize:

    # * Verify DEBUG is capped at VERBOSE without dev mode
    def test_debug_requires_dev_mode(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=False)
        assert manager.get_level() == OutputLevel.VERBOSE

    # * Verify DEBUG allowed in dev mode
    def test_debug_in_dev_mode(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.DEBUG, dev_mode=True)
        assert manager.is_debug_enabled() is True


class TestOutput:

    # * Verify verbose output is suppressed at NORMAL
    def test_verbose_suppressed_at_normal(self):
        manager = OutputManager()
        manager.initialize()
        with patch("countdown.timer_io.console.console") as mock_console:
            manager.verbose("resumed", "TIMER")
        mock_console.print.assert_not_called()

    # * Verify verbose output prints category & message
    def test_verbose_prints(self):
        manager = OutputManager()
        manager.initialize(requested_level=OutputLevel.VERBOSE)
        with patch("countdown.timer_io.console.console") as mock_console:
            manager.verbose("resumed", "TIMER", detail="line one\nline two")
        printed = [c.args[0] for c in mock_console.print.call_args_list]
        assert "TIMER" in printed[0] and "resumed" in printed[0]
        assert len(printed) == 3


class TestLogFile:

    # * Verify verbose & debug lines are mirrored to the log file
    def test_writes_log_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "countdown.log"
        manager = OutputManager()
        manager.initialize(
            requested_level=OutputLevel.DEBUG, dev_mode=True, log_file=log_file
        )
        manager.start_session()
        with patch("countdown.timer_io.console.console"):
            manager.verbose("paused (3.000s left)", "TIMER")
            manager.debug("next firing in 500.0ms", "SCHEDULE")
        manager.end_session()

        content = log_file.read_text(encoding="utf-8")
        assert "Session Started" in content
        assert "[TIMER] paused (3.000s left)" in content
        assert "[SCHEDULE] next firing in 500.0ms" in content
        assert "Session Ended" in content
        assert manager.log_file_path == log_file

    # * Verify cleanup is safe to repeat
    def test_cleanup_idempotent(self, tmp_path: Path):
        manager = OutputManager()
        manager.initialize(log_file=tmp_path / "x.log")
        manager.cleanup()
        manager.cleanup()
