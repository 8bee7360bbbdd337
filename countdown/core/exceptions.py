# countdown/core/exceptions.py
# Custom exception hierarchy for the countdown package (pure - no I/O operations)

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for the countdown package
class CountdownError(Exception):
    pass


# * Timer misuse errors
class TimerError(CountdownError):
    pass


# * Timer was resumed after cancel() (cancel is terminal)
class TimerCancelledError(TimerError):
    pass


# * Tick interval must be positive
class InvalidIntervalError(TimerError):
    def __init__(self, message: str, interval: Any):
        super().__init__(message)
        self.interval = interval

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, interval={self.interval!r})"


# * Configuration errors
class ConfigurationError(CountdownError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(CountdownError):
    pass
