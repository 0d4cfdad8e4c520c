"""Renderers for the countdown display (Rich).

Two implementations of `CountdownTerminal`:
- `GaugeTerminal`: full-screen gauge on the alternate screen (`rich.live.Live`).
- `PlainTerminal`: a single progress line rewritten with a carriage return.

Both delegate key polling to a `KeyReader` and are context managers, so the
screen/line state is cleaned up on every exit path.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskID, TextColumn
from rich.text import Text

from core.domain.models import Deadline
from core.interfaces.terminal import KeyReader

PLAIN_BAR_WIDTH = 50


def plain_progress_line(deadline: Deadline, percentage: float, label: str) -> str:
    """`Endzeit: <target> [=====     ] 42.00% Time left: ...` (one `=` per 2 %)."""

    filled = "=" * int(percentage / 2)
    return f"Endzeit: {deadline} [{filled:<{PLAIN_BAR_WIDTH}}] {percentage:.2f}% {label}"


class GaugeTerminal:
    def __init__(
        self,
        deadline: Deadline,
        keys: KeyReader,
        *,
        console: Console | None = None,
        hint: str | None = None,
    ) -> None:
        self._deadline = deadline
        self._keys = keys
        self._console = console or Console()
        self._hint = hint
        self._progress = Progress(
            BarColumn(bar_width=None, complete_style="green", finished_style="bold green"),
            TextColumn("[bold]{task.percentage:>3.0f}%"),
            TextColumn("{task.fields[label]}"),
            expand=True,
            console=self._console,
        )
        self._task: TaskID = self._progress.add_task("endzeit", total=100.0, label="")
        self._live: Live | None = None

    def _renderable(self) -> Group:
        header = Text(f"Endzeit: {self._deadline}", style="bold cyan")
        body = Panel(self._progress.get_renderable(), title=header, border_style="cyan", padding=(1, 2))
        if not self._hint:
            return Group(body)
        return Group(body, Text(self._hint, style="dim"))

    def __enter__(self) -> "GaugeTerminal":
        self._live = Live(
            self._renderable(),
            console=self._console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        self._live.__enter__()
        return self

    def __exit__(self, *exc_info: object) -> None:
        live, self._live = self._live, None
        if live is not None:
            live.__exit__(None, None, None)

    def render(self, percentage: float, label: str) -> None:
        self._progress.update(self._task, completed=percentage, label=label)
        if self._live is not None:
            self._live.update(self._renderable(), refresh=True)

    def poll_key(self, timeout: float) -> str | None:
        return self._keys.read_key(timeout)


class PlainTerminal:
    def __init__(self, deadline: Deadline, keys: KeyReader, *, console: Console | None = None) -> None:
        self._deadline = deadline
        self._keys = keys
        self._console = console or Console()
        self._dirty = False

    def __enter__(self) -> "PlainTerminal":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._dirty:
            self._write("\n")
            self._dirty = False

    def render(self, percentage: float, label: str) -> None:
        self._write("\r" + plain_progress_line(self._deadline, percentage, label))
        self._dirty = True

    def poll_key(self, timeout: float) -> str | None:
        return self._keys.read_key(timeout)

    def _write(self, text: str) -> None:
        # Escritura directa: Rich descarta los '\r' de los renderables.
        stream = self._console.file
        stream.write(text)
        stream.flush()
