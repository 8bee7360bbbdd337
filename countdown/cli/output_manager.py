# countdown/cli/output_manager.py
# Console & log-file sink for verbose & debug timer logging

# * Real implementation w/ Rich console output & plain-text file logging
# * Registered via set_output_manager() at CLI startup

from __future__ import annotations

import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from ..core.output import OutputLevel


class OutputManager:
    # Implements OutputInterface for use w/ the core registry.
    # Timer events arrive from scheduler threads, so console & file writes share a lock.

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: TextIO | None = None
        self._write_lock = threading.Lock()

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode)
        self._session_start = time.monotonic()
        self._setup_log_file(log_file)

    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool
    ) -> OutputLevel:
        # DEBUG requires dev_mode; cap at VERBOSE otherwise
        max_allowed = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if self._level >= OutputLevel.DEBUG:
            from ..timer_io.console import console

            with self._write_lock:
                console.print(f"[dim]\\[{category}][/] {msg}", **kwargs)
                self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level < OutputLevel.VERBOSE:
            return
        from ..timer_io.console import console

        with self._write_lock:
            prefix = f"[dim][{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            console.print(f"{prefix} {msg}", **kwargs)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    console.print(f"  [dim]{line}[/]")
                    self._write_to_file(f"  {line}")

    def start_session(self) -> None:
        self._session_start = time.monotonic()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            if self._dev_mode:
                self._write_to_file("Mode: Developer (dev_mode enabled)")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.monotonic() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_file_path = log_file
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log_file_handle = open(log_file, "a", encoding="utf-8")

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None

    @property
    def log_file_path(self) -> Path | None:
        return self._log_file_path
