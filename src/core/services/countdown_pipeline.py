"""Countdown orchestration.

This module wires the pieces together so the CLI only deals with
presentation and exit codes: resolve the deadline against the wall clock
(once), run the loop inside a scoped terminal session, then hand the outcome
to the completion handler after the terminal has been released.
"""

from __future__ import annotations

import logging
import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Callable

from core.domain.models import CompletionReport, Deadline, LoopOutcome, LoopStatus
from core.interfaces.clock import MonotonicClock, WallClock
from core.interfaces.runner import CommandRunner
from core.interfaces.terminal import CountdownTerminal
from core.services.completion import CompletionHandler
from core.services.countdown_loop import (
    DEFAULT_POLL_TIMEOUT,
    DEFAULT_QUIT_KEYS,
    DEFAULT_TICK_INTERVAL,
    CountdownLoop,
)
from core.services.deadline import compute_total_seconds, resolve_deadline

logger = logging.getLogger(__name__)

TerminalFactory = Callable[[Deadline], AbstractContextManager[CountdownTerminal]]


@dataclass
class CountdownRequest:
    """Parameters that control a countdown run."""

    date: str | None = None
    time: str | None = None
    execute: str | None = None
    tick_interval: float = DEFAULT_TICK_INTERVAL
    poll_timeout: float = DEFAULT_POLL_TIMEOUT
    quit_keys: str = DEFAULT_QUIT_KEYS


@dataclass
class CountdownRuntime:
    """Collaborators; swapped for fakes in tests."""

    wall_clock: WallClock
    monotonic_clock: MonotonicClock
    open_terminal: TerminalFactory
    runner: CommandRunner
    sleep: Callable[[float], None] = field(default=time.sleep)


@dataclass
class CountdownHooks:
    """Optional callbacks for UI layers."""

    started: Callable[[Deadline, float], None] | None = None


@dataclass
class CountdownResult:
    """Output of a pipeline invocation."""

    deadline: Deadline
    total_seconds: float
    outcome: LoopOutcome
    report: CompletionReport | None = None

    @property
    def cancelled(self) -> bool:
        return self.outcome.status is LoopStatus.CANCELLED


def prepare_deadline(request: CountdownRequest, wall_clock: WallClock) -> tuple[Deadline, float]:
    """Resolve and validate the deadline; the only wall-clock read of a run."""

    now = wall_clock.now()
    deadline = resolve_deadline(request.date, request.time, now=now)
    total = compute_total_seconds(deadline, now)
    logger.debug("Deadline %s is %.3fs away", deadline, total)
    return deadline, total


def run_countdown(
    request: CountdownRequest,
    runtime: CountdownRuntime,
    hooks: CountdownHooks | None = None,
) -> CountdownResult:
    """Validate input, run the loop, then fire the completion handler.

    Raises `InputValidationError` before any terminal setup and
    `TerminalIOError` after the terminal session has been restored.
    """

    deadline, total = prepare_deadline(request, runtime.wall_clock)
    hooks = hooks or CountdownHooks()
    if hooks.started:
        hooks.started(deadline, total)

    with runtime.open_terminal(deadline) as terminal:
        loop = CountdownLoop(
            total,
            clock=runtime.monotonic_clock,
            terminal=terminal,
            sleep=runtime.sleep,
            tick_interval=request.tick_interval,
            poll_timeout=request.poll_timeout,
            quit_keys=request.quit_keys,
        )
        outcome = loop.run()

    report = CompletionHandler(runtime.runner).on_complete(outcome, request.execute)
    return CountdownResult(deadline=deadline, total_seconds=total, outcome=outcome, report=report)
