# countdown/cli/decorators.py
# CLI decorator mapping countdown errors to Rich output & exit codes

import functools
from typing import Callable, TypeVar, Any, cast

import typer

from ..core.exceptions import (
    CountdownError,
    TimerError,
    ConfigurationError,
    JSONParsingError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling countdown errors in CLI commands w/ Rich output
def handle_countdown_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from ..timer_io.console import console

        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort, typer.BadParameter):
            raise
        except TimerError as e:
            console.print(format_error_message("Timer Error", str(e)))
            raise SystemExit(1)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except CountdownError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)
        except Exception as e:
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
