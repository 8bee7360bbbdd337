# countdown/ui/display.py
# Rich progress rendering for a running countdown; frozen while the timer is paused

from __future__ import annotations

import math
import threading
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Generator, NamedTuple, Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, ProgressColumn, TaskID, TextColumn
from rich.text import Text

from ..core.timer import CountdownTimer
from ..timer_io.console import get_console


# * Format seconds left as m:ss or h:mm:ss, rounding partial seconds up
def format_time_left(seconds: float) -> str:
    whole = max(0, math.ceil(seconds))
    if whole >= 3600:
        return str(timedelta(seconds=whole))
    return f"{whole // 60}:{whole % 60:02d}"


# time left as last seen by a timer callback or pause; read by the render thread
class TimerSnapshot(NamedTuple):
    time_left: float
    paused: bool


# time-left column drawn from the display's snapshot so rendering never takes the timer lock
class TimeLeftColumn(ProgressColumn):
    def __init__(self, display: "CountdownDisplay"):
        super().__init__()
        self._display = display

    def render(self, task: Any) -> Text:
        snapshot = self._display.snapshot
        if snapshot is None:
            return Text("-:--", style="progress.remaining")
        s = format_time_left(snapshot.time_left)
        if snapshot.paused:
            return Text(f"{s} paused", style="yellow")
        return Text(s, style="progress.remaining")


# bridges timer callbacks into a Progress bar (or plain tick lines)
class CountdownDisplay:
    def __init__(
        self,
        description: str = "Counting down",
        console: Optional[Console] = None,
        plain: bool = False,
    ) -> None:
        self.description = description
        self.console = console if console is not None else get_console()
        self.plain = plain
        self.timer: CountdownTimer | None = None
        self.progress: Progress | None = None
        self.snapshot: TimerSnapshot | None = None
        self.ticks: list[float] = []
        self.finished = threading.Event()
        self._task: TaskID | None = None

    def attach(self, timer: CountdownTimer) -> None:
        self.timer = timer
        self.snapshot = TimerSnapshot(timer.time_left(), bool(timer.is_paused()))

    def build_progress(self) -> Progress:
        self.progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TimeLeftColumn(self),
            console=self.console,
            refresh_per_second=8,
            transient=False,
        )
        return self.progress

    # render live progress for the duration of the block (no-op in plain mode)
    @contextmanager
    def live(self) -> Generator["CountdownDisplay", None, None]:
        if self.plain:
            yield self
            return
        total = self.timer.total_countdown() if self.timer is not None else None
        with self.build_progress() as progress:
            self._task = progress.add_task(self.description, total=total)
            yield self
        self._task = None

    # * Timer callbacks

    def on_tick(self, seconds_left: float) -> None:
        self.ticks.append(seconds_left)
        self.snapshot = TimerSnapshot(seconds_left, False)
        if self.plain:
            self.console.print(f"[cyan]tick[/] {format_time_left(seconds_left)} left")
        else:
            self._update()

    def on_finish(self) -> None:
        self.snapshot = TimerSnapshot(0.0, False)
        if self.plain:
            self.console.print("[green]done[/]")
        else:
            self._update()
        self.finished.set()

    def _update(self) -> None:
        if self.progress is None or self._task is None or self.timer is None:
            return
        self.progress.update(self._task, completed=self.timer.time_passed())

    # pause the timer & stop live rendering for the block; resume both afterwards
    @contextmanager
    def paused(self) -> Generator[None, None, None]:
        timer = self.timer
        if timer is not None:
            timer.pause()
            self.snapshot = TimerSnapshot(timer.time_left(), not timer.is_finished())
        progress = self.progress if not self.plain else None
        if self.plain and timer is not None:
            self.console.print(f"[yellow]paused[/] {format_time_left(timer.time_left())} left")
        elif progress is not None:
            self._update()
            progress.refresh()
            progress.stop()
        try:
            yield
        finally:
            if progress is not None:
                progress.start()
            if timer is not None:
                if self.plain:
                    self.console.print("[yellow]resumed[/]")
                timer.resume()
                self.snapshot = TimerSnapshot(timer.time_left(), False)
