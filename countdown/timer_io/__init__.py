# countdown/timer_io/__init__.py
# Package initialization & exports for console & file I/O

from .console import console, get_console
from .generics import write_json_safe, read_json_safe, ensure_parent

__all__ = [
    "console",
    "get_console",
    "write_json_safe",
    "read_json_safe",
    "ensure_parent",
]
