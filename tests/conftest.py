"""Shared fakes: clocks, terminal and command runner."""

import os
from contextlib import contextmanager
from datetime import datetime

import pytest

from core.domain.errors import CommandExecutionError
from core.domain.models import ExecutionResult

NOW = datetime(2026, 10, 18, 12, 0, 0)


class FakeClock:
    """Wall clock + monotonic clock + sleep, all driven by hand."""

    def __init__(self, now: datetime = NOW, start: float = 1000.0) -> None:
        self.wall = now
        self.mono = start
        self.sleeps: list[float] = []

    def now(self) -> datetime:
        return self.wall

    def monotonic(self) -> float:
        return self.mono

    def advance(self, seconds: float) -> None:
        self.mono += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)


class FakeTerminal:
    """Records frames; `keys` are returned one per poll (None = no key)."""

    def __init__(self, keys=None, *, clock: FakeClock | None = None, poll_cost: float = 0.0) -> None:
        self.frames: list[tuple[float, str]] = []
        self.polls: list[float] = []
        self._keys = list(keys or [])
        self._clock = clock
        self._poll_cost = poll_cost

    def render(self, percentage: float, label: str) -> None:
        self.frames.append((percentage, label))

    def poll_key(self, timeout: float) -> str | None:
        self.polls.append(timeout)
        if self._clock is not None and self._poll_cost:
            self._clock.advance(self._poll_cost)
        if not self._keys:
            return None
        key = self._keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


class FakeRunner:
    def __init__(self, result: ExecutionResult | None = None, *, error: str | None = None) -> None:
        self.calls: list[str] = []
        self._result = result
        self._error = error

    def run(self, command: str) -> ExecutionResult:
        self.calls.append(command)
        if self._error is not None:
            raise CommandExecutionError(self._error)
        if self._result is not None:
            return self._result
        return ExecutionResult(command=command, success=True, returncode=0, stdout="ok\n")


class TerminalFactory:
    """`Deadline -> context manager` that hands out a FakeTerminal and logs open/close."""

    def __init__(self, terminal: FakeTerminal) -> None:
        self.terminal = terminal
        self.events: list[str] = []
        self.deadlines: list = []

    @contextmanager
    def __call__(self, deadline):
        self.deadlines.append(deadline)
        self.events.append("open")
        try:
            yield self.terminal
        finally:
            self.events.append("close")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Sin .env del proyecto ni variables ENDZEIT_* del entorno real.
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("ENDZEIT_"):
            monkeypatch.delenv(key, raising=False)
