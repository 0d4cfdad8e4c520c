"""Countdown loop: render, check completion, poll for quit, sleep.

Single-threaded and cooperative. The monotonic reference instant is captured
once when `run()` starts; the total duration is a fixed scalar computed from
the wall clock before the loop exists.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from core.domain.errors import TerminalIOError
from core.domain.models import CountdownState, LoopOutcome, LoopStatus
from core.interfaces.clock import MonotonicClock
from core.interfaces.terminal import CountdownTerminal
from core.services.breakdown import decompose, format_breakdown
from core.services.progress import percentage, remaining_seconds

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.25
DEFAULT_POLL_TIMEOUT = 0.1
DEFAULT_QUIT_KEYS = "q"

_T = TypeVar("_T")


class CountdownLoop:
    def __init__(
        self,
        total_seconds: float,
        *,
        clock: MonotonicClock,
        terminal: CountdownTerminal,
        sleep: Callable[[float], None] = time.sleep,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        poll_timeout: float = DEFAULT_POLL_TIMEOUT,
        quit_keys: str = DEFAULT_QUIT_KEYS,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if not 0 < poll_timeout < tick_interval:
            raise ValueError("poll_timeout must be positive and shorter than tick_interval")

        self._total = float(total_seconds)
        self._clock = clock
        self._terminal = terminal
        self._sleep = sleep
        self._tick_interval = tick_interval
        self._poll_timeout = poll_timeout
        self._quit_keys = frozenset(quit_keys)

        self._status = LoopStatus.RUNNING
        self._start: float | None = None
        self._last_elapsed = 0.0
        self._ticks = 0

    @property
    def status(self) -> LoopStatus:
        return self._status

    @property
    def total_seconds(self) -> float:
        return self._total

    @property
    def ticks(self) -> int:
        return self._ticks

    def snapshot(self) -> CountdownState:
        """Current state derived from the monotonic clock."""

        if self._start is None:
            raise RuntimeError("CountdownLoop has not been started")

        # Nunca decrece, aunque el reloj inyectado retroceda.
        elapsed = max(self._clock.monotonic() - self._start, self._last_elapsed)
        self._last_elapsed = elapsed

        remaining = remaining_seconds(elapsed, self._total)
        breakdown = decompose(remaining)
        return CountdownState(
            total_seconds=self._total,
            elapsed_seconds=elapsed,
            remaining_seconds=remaining,
            percentage=percentage(elapsed, self._total),
            breakdown=breakdown,
            label=f"Time left: {format_breakdown(breakdown)}",
        )

    def run(self) -> LoopOutcome:
        """Run until completion or cancellation.

        Terminal failures abort the loop as `TerminalIOError`; Ctrl+C counts
        as a user cancellation.
        """

        if self._start is not None:
            raise RuntimeError("CountdownLoop can only run once")

        self._start = self._clock.monotonic()
        logger.debug(
            "Countdown started: total=%.3fs tick=%.3fs poll=%.3fs",
            self._total,
            self._tick_interval,
            self._poll_timeout,
        )

        last_state: CountdownState | None = None
        try:
            while self._status is LoopStatus.RUNNING:
                tick_start = self._clock.monotonic()
                last_state = self._tick()
                if self._status is not LoopStatus.RUNNING:
                    break
                sleep_time = self._tick_interval - (self._clock.monotonic() - tick_start)
                if sleep_time > 0:
                    self._sleep(sleep_time)
        except KeyboardInterrupt:
            logger.debug("Interrupted by user")
            self._transition(LoopStatus.CANCELLED)

        return LoopOutcome(status=self._status, ticks=self._ticks, last_state=last_state)

    def _tick(self) -> CountdownState:
        self._ticks += 1
        state = self.snapshot()
        self._terminal_call(self._terminal.render, state.percentage, state.label)

        if state.is_finished:
            self._transition(LoopStatus.COMPLETED)
            return state

        key = self._terminal_call(self._terminal.poll_key, self._poll_timeout)
        if key is not None and key in self._quit_keys:
            self._transition(LoopStatus.CANCELLED)
        return state

    def _transition(self, status: LoopStatus) -> None:
        if self._status.is_terminal:
            return
        logger.debug("Countdown %s after %d tick(s)", status.value, self._ticks)
        self._status = status

    @staticmethod
    def _terminal_call(fn: Callable[..., _T], *args: object) -> _T:
        try:
            return fn(*args)
        except OSError as exc:
            raise TerminalIOError(str(exc) or exc.__class__.__name__) from exc
