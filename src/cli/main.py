"""CLI de endzeit (Typer).

Por qué la CLI es delgada:
- Solo traduce opciones/config a un `CountdownRequest`, elige adaptadores y
  mapea errores del dominio a exit codes.
- Toda la lógica de la cuenta atrás vive en `core.services`.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.shell_runner import ShellCommandRunner
from adapters.system_clock import SystemMonotonicClock, SystemWallClock
from adapters.terminal import terminal_factory
from cli.ui_components import build_completion_panel, build_start_line, error_markup
from core.config import AppSettings, RendererKind
from core.domain.errors import InputValidationError, TerminalIOError
from core.logging_config import configure_logging
from core.services.countdown_pipeline import (
    CountdownHooks,
    CountdownRequest,
    CountdownRuntime,
    run_countdown,
)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_TERMINAL_ERROR = 2
EXIT_COMMAND_FAILED = 3

app = typer.Typer(
    add_completion=False,
    help="Count down to a date/time and optionally run a command when it is reached.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def build_runtime(settings: AppSettings, renderer: RendererKind, *, console: Console) -> CountdownRuntime:
    """Adaptadores reales (reloj del sistema, terminal, shell)."""

    hint = f"Press '{settings.quit_keys[0]}' to quit"
    return CountdownRuntime(
        wall_clock=SystemWallClock(),
        monotonic_clock=SystemMonotonicClock(),
        open_terminal=terminal_factory(renderer=renderer, console=console, hint=hint),
        runner=ShellCommandRunner(timeout=settings.command_timeout_seconds),
    )


def _fail(message: str, code: int) -> typer.Exit:
    _err_console.print(error_markup(message))
    return typer.Exit(code=code)


@app.command()
def countdown(
    date: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date in the format YYYY-MM-DD (defaults to today)."
    ),
    time: Optional[str] = typer.Option(
        None, "--time", "-t", help="Time in the format HH[:MM[:SS]] (defaults to now)."
    ),
    execute: Optional[str] = typer.Option(
        None, "--execute", help="Command to execute when the deadline is reached."
    ),
    renderer: Optional[RendererKind] = typer.Option(
        None, "--renderer", case_sensitive=False, help="gauge, plain or auto (default from config)."
    ),
    fail_on_command_error: Optional[bool] = typer.Option(
        None,
        "--fail-on-command-error/--ignore-command-error",
        help="Exit with status 3 when the completion command fails.",
    ),
    tick_interval: Optional[float] = typer.Option(
        None, "--tick-interval", min=0.05, max=5.0, help="Seconds between display updates."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Wait until the given date/time, showing live progress."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _fail(f"Invalid configuration: {exc}", EXIT_INVALID_INPUT)

    configure_logging("DEBUG" if verbose else settings.log_level)

    tick = tick_interval if tick_interval is not None else settings.tick_interval_seconds
    # El polling tiene que caber dentro del tick.
    poll = min(settings.poll_timeout_seconds, tick / 2)
    request = CountdownRequest(
        date=date,
        time=time,
        execute=execute,
        tick_interval=tick,
        poll_timeout=poll,
        quit_keys=settings.quit_keys,
    )
    runtime = build_runtime(settings, renderer or settings.renderer, console=_console)
    hooks = CountdownHooks(
        started=lambda deadline, total: _console.print(
            build_start_line(deadline, total, quit_keys=settings.quit_keys)
        ),
    )

    try:
        result = run_countdown(request, runtime, hooks)
    except InputValidationError as exc:
        raise _fail(str(exc), EXIT_INVALID_INPUT)
    except TerminalIOError as exc:
        logger.debug("Terminal failure", exc_info=True)
        raise _fail(str(exc), EXIT_TERMINAL_ERROR)

    if result.cancelled:
        _console.print("[yellow]Countdown cancelled.[/yellow]")
        raise typer.Exit(code=EXIT_OK)

    report = result.report
    if report is None:
        raise typer.Exit(code=EXIT_OK)

    _console.print(build_completion_panel(report))
    if report.result is not None and not report.succeeded:
        if report.result.error:
            _err_console.print(error_markup(report.result.error))
        should_fail = (
            fail_on_command_error if fail_on_command_error is not None else settings.fail_on_command_error
        )
        if should_fail:
            raise typer.Exit(code=EXIT_COMMAND_FAILED)


def run() -> None:
    app()
