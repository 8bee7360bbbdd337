# countdown/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for timer transitions, ticks & file I/O

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)
    manager.start_session()


# * Check if verbose logging is enabled
def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Log a timer state transition (create, pause, resume, cancel, finish)
def vlog_timer(event: str, time_left: float, detail: str | None = None) -> None:
    get_output_manager().verbose(f"{event} ({time_left:.3f}s left)", "TIMER", detail)


# * Log a delivered tick & how long the callback took
def vlog_tick(time_left: float, callback_duration: float) -> None:
    get_output_manager().debug(
        f"tick at {time_left:.3f}s left, callback took {callback_duration * 1000:.1f}ms",
        "TICK",
    )


# * Log the delay chosen for the next firing (dev-mode only)
def vlog_schedule(delay: float, skipped: int = 0) -> None:
    if not get_output_manager().is_debug_enabled():
        return
    msg = f"next firing in {delay * 1000:.1f}ms"
    if skipped:
        msg += f" (skipped {skipped} interval{'s' if skipped != 1 else ''})"
    get_output_manager().debug(msg, "SCHEDULE")


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Cleanup verbose logging
def cleanup_verbose() -> None:
    get_output_manager().end_session()
