# countdown/ui/__init__.py
# Countdown progress display exports

from .display import CountdownDisplay, TimeLeftColumn, format_time_left

__all__ = ["CountdownDisplay", "TimeLeftColumn", "format_time_left"]
