# countdown/timer_io/console.py
# Centralized console management for the countdown CLI & progress display

# A single Console proxy that all modules import so output, progress rendering & tests share one target.
# - Console is created as a bare Console() at import time
# - The _ConsoleProxy keeps module-level `console` references valid when tests patch the module attribute
# - Tests: patch `countdown.timer_io.console.console` to intercept output

from __future__ import annotations
from typing import Any
from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Get the underlying Console instance
def get_console() -> Console:
    # handle both proxy & direct Console (e.g., when patched in tests)
    if hasattr(console, "_get_console"):
        return console._get_console()
    return console  # type: ignore[return-value]


__all__ = [
    "console",
    "get_console",
]
