# countdown/core/output.py
# Log levels, the sink protocol the timer core logs through & the process-wide sink registry
# * No I/O here: the timer imports this module, never countdown/cli

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Protocol, runtime_checkable


# * NORMAL prints nothing extra; VERBOSE adds timer transitions; DEBUG adds ticks & scheduling
class OutputLevel(IntEnum):
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * What the core needs from a log sink
@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Sink used until the CLI registers a real one (library use, tests)
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        return None

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None:
        return None

    def start_session(self) -> None:
        return None

    def end_session(self) -> None:
        return None


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# back to the null sink (test teardown)
def reset_output_manager() -> None:
    set_output_manager(NullOutputManager())
