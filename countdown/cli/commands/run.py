# countdown/cli/commands/run.py
# `countdown run`: drive one countdown w/ live progress & an optional scripted pause

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.timer import CountdownTimer
from ...core.verbose import vlog_config
from ...timer_io.console import console
from ...ui.display import CountdownDisplay, format_time_left
from ..app import app
from ..decorators import handle_countdown_error


@app.command(help="Run a countdown, printing progress until it finishes.")
@handle_countdown_error
def run(
    ctx: typer.Context,
    total: Optional[float] = typer.Option(
        None, "--total", "-t", help="Countdown length in seconds (default from config)"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", "-i", help="Seconds between ticks (default from config)"
    ),
    auto_start: Optional[bool] = typer.Option(
        None,
        "--auto-start/--no-auto-start",
        help="Start immediately instead of waiting for Enter (default from config)",
    ),
    pause_at: Optional[float] = typer.Option(
        None, "--pause-at", help="Pause after this many seconds of countdown"
    ),
    pause_for: Optional[float] = typer.Option(
        None, "--pause-for", min=0.0, help="How long to stay paused; required w/ --pause-at"
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Print one line per tick instead of a progress bar"
    ),
) -> None:
    if pause_at is not None and pause_for is None:
        raise typer.BadParameter("required when --pause-at is given", param_hint="--pause-for")

    settings = get_settings(ctx)
    total = settings.total if total is None else total
    interval = settings.interval if interval is None else interval
    auto_start = settings.auto_start if auto_start is None else auto_start
    vlog_config("total", total)
    vlog_config("interval", interval)
    vlog_config("auto_start", auto_start)

    display = CountdownDisplay(plain=plain or not settings.show_progress)
    timer = CountdownTimer(
        total, interval, display.on_tick, display.on_finish, auto_start=auto_start
    )
    display.attach(timer)

    if not auto_start:
        console.input("[cyan]Press Enter to start[/] ")

    try:
        with display.live():
            timer.create()
            if not auto_start:
                timer.resume()

            if pause_at is not None and not display.finished.wait(pause_at):
                with display.paused():
                    display.finished.wait(pause_for)

            display.finished.wait()
    except KeyboardInterrupt:
        timer.cancel()
        console.print(
            f"\n[yellow]Cancelled[/] with {format_time_left(timer.time_left())} left"
        )
        raise typer.Exit(130)

    console.print(
        f"[green]Finished[/] {total:g}s countdown after {len(display.ticks)} ticks"
    )
